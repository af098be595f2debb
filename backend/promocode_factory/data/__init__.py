"""Initial data for the in-memory repositories."""

from promocode_factory.data.fake_data import fake_employees, fake_roles

__all__ = ["fake_employees", "fake_roles"]
