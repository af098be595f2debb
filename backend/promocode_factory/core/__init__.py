"""Application core: settings, logging and domain exceptions."""
