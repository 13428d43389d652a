from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class RegisterRequest(BaseModel):
    """Schema for registering a new user"""
    username: str
    email: str
    password: str


class LoginRequest(BaseModel):
    """Schema for logging in"""
    email: str
    password: str


class TaskCreate(BaseModel):
    """Schema for creating a new task"""
    task: str
    status: str


class TaskUpdate(BaseModel):
    """Schema for updating a task; omitted fields are left untouched"""
    task: Optional[str] = None
    status: Optional[str] = None


class MessageResponse(BaseModel):
    message: str


class TokenResponse(BaseModel):
    jwtToken: str


class TaskCreatedResponse(BaseModel):
    message: str
    taskId: int


class TaskResponse(BaseModel):
    """Schema for task response"""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    user_id: int = Field(alias="userId")
    task: str
    status: str


class UserProfileResponse(BaseModel):
    """Stored user row, password hash included"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    password: str


class ErrorResponse(BaseModel):
    errorMsg: str
