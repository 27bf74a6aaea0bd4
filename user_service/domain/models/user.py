from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    name: str
    age: int
    email: str

    def __post_init__(self):
        """Business validations"""
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Name is required")
        if isinstance(self.age, bool) or not isinstance(self.age, int) or self.age < 1:
            raise ValueError("Age must be a positive integer")
        if not isinstance(self.email, str) or "@" not in self.email:
            raise ValueError("Invalid email format")
