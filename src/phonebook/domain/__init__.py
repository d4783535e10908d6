"""Domain layer: entities and value objects. No dependencies on outer layers."""

from phonebook.domain.entities import Contact, PhoneNumber, is_valid_number

__all__ = ["Contact", "PhoneNumber", "is_valid_number"]
