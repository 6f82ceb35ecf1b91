from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from employee_portal.core.dependencies import get_employee_service
from employee_portal.core.result import Err
from employee_portal.models.auth import MessageResponse
from employee_portal.models.employee import (
    EmployeeCreate,
    EmployeeCreatedResponse,
    EmployeeListResponse,
    EmployeeResponse,
    EmployeeUpdate,
    UploadedImage,
)
from employee_portal.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["employees"])

FIELDS_REQUIRED = "All fields are required."
EMPLOYEE_NOT_FOUND = "Employee not found"


async def _read_image(upload: UploadFile) -> UploadedImage:
    return UploadedImage(
        filename=upload.filename or "upload",
        content=await upload.read(),
        content_type=upload.content_type,
    )


@router.get("/getAllEmployees", response_model=EmployeeListResponse)
async def get_all_employees(
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    result = await service.list_employees()
    if isinstance(result, Err):
        logger.error("Error getting employees: %s (%s)", result.message, result.code)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error retrieving employees",
        )

    return EmployeeListResponse(message="Employees retrieved successfully", employees=result.value)


@router.post("/addEmployee", status_code=status.HTTP_201_CREATED, response_model=EmployeeCreatedResponse)
async def add_employee(
    firstName: str = Form(""),  # noqa: N803
    lastName: str = Form(""),  # noqa: N803
    idNumber: str = Form(""),  # noqa: N803
    eMailAddress: str = Form(""),  # noqa: N803
    phoneNumber: str = Form(""),  # noqa: N803
    position: str = Form(""),
    imageFile: UploadFile | None = File(None),  # noqa: B008, N803
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    if not all((firstName, lastName, idNumber, eMailAddress, phoneNumber, position)):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=FIELDS_REQUIRED)

    if imageFile is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Image file is required.")

    data = EmployeeCreate(
        firstName=firstName,
        lastName=lastName,
        idNumber=idNumber,
        eMailAddress=eMailAddress,
        phoneNumber=phoneNumber,
        position=position,
    )
    result = await service.add_employee(data, await _read_image(imageFile))
    if isinstance(result, Err):
        logger.error("Error adding employee: %s (%s)", result.message, result.code)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": "Error adding employee", "error": result.message},
        )

    return EmployeeCreatedResponse(message="Employee added successfully", employeeId=result.value)


@router.get("/getEmployee/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    result = await service.get_employee(employee_id)
    if isinstance(result, Err):
        logger.error("Error getting employee %s: %s (%s)", employee_id, result.message, result.code)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error retrieving employee",
        )

    if result.value is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=EMPLOYEE_NOT_FOUND)

    return EmployeeResponse(message="Employee retrieved successfully", employee=result.value)


@router.put(
    "/updateEmployee/{employee_id}",
    response_model=EmployeeResponse,
    response_model_exclude_none=True,
)
async def update_employee(
    employee_id: str,
    firstName: str = Form(""),  # noqa: N803
    lastName: str = Form(""),  # noqa: N803
    eMailAddress: str = Form(""),  # noqa: N803
    phoneNumber: str = Form(""),  # noqa: N803
    position: str = Form(""),
    imageFile: UploadFile | None = File(None),  # noqa: B008, N803
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    if not all((firstName, lastName, eMailAddress, phoneNumber, position)):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=FIELDS_REQUIRED)

    data = EmployeeUpdate(
        firstName=firstName,
        lastName=lastName,
        eMailAddress=eMailAddress,
        phoneNumber=phoneNumber,
        position=position,
    )
    image = await _read_image(imageFile) if imageFile is not None else None

    result = await service.update_employee(employee_id, data, image)
    if isinstance(result, Err):
        logger.error("Error updating employee %s: %s (%s)", employee_id, result.message, result.code)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error updating employee",
        )

    if result.value is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=EMPLOYEE_NOT_FOUND)

    return EmployeeResponse(message="Employee updated successfully", employee=result.value)


@router.delete("/deleteEmployee/{employee_id}", response_model=MessageResponse)
async def delete_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    result = await service.delete_employee(employee_id)
    if isinstance(result, Err):
        logger.error("Error deleting employee %s: %s (%s)", employee_id, result.message, result.code)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error deleting employee",
        )

    if not result.value:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=EMPLOYEE_NOT_FOUND)

    return MessageResponse(message="Employee deleted successfully")
