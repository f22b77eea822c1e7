from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class UserType(str, Enum):
    EMPLOYEE = "Employee"
    ADMIN = "Admin"


class User(BaseModel):
    type: UserType = UserType.EMPLOYEE
    email: str = ""
