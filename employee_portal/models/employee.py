"""Employee models for the employees document container."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class EmployeeUpdate(BaseModel):
    """Fields an update may overwrite; idNumber is fixed after creation."""

    firstName: str  # noqa: N815
    lastName: str  # noqa: N815
    eMailAddress: str  # noqa: N815
    phoneNumber: str  # noqa: N815
    position: str


class EmployeeCreate(EmployeeUpdate):
    idNumber: str  # noqa: N815


class Employee(BaseModel):
    """Stored employee document; unknown keys are passed through untouched."""

    model_config = ConfigDict(extra="allow")

    id: str
    firstName: str | None = None  # noqa: N815
    lastName: str | None = None  # noqa: N815
    idNumber: str | None = None  # noqa: N815
    eMailAddress: str | None = None  # noqa: N815
    phoneNumber: str | None = None  # noqa: N815
    position: str | None = None
    image: str | None = None


class UploadedImage(BaseModel):
    filename: str
    content: bytes
    content_type: str | None = None


class EmployeeListResponse(BaseModel):
    message: str
    employees: list[Employee]


class EmployeeResponse(BaseModel):
    message: str
    employee: Employee


class EmployeeCreatedResponse(BaseModel):
    message: str
    employeeId: str  # noqa: N815
