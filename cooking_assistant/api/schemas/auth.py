"""인증 관련 스키마"""
from pydantic import BaseModel, ConfigDict, EmailStr, Field


class SignupRequest(BaseModel):
    """회원가입 요청"""
    email: EmailStr = Field(..., description="이메일 (고유)")
    password: str = Field(..., min_length=6, description="비밀번호")
    name: str = Field(..., min_length=1, max_length=50, description="표시 이름")


class LoginRequest(BaseModel):
    """로그인 요청 (이메일 기반)"""
    email: EmailStr = Field(..., description="이메일")
    password: str = Field(..., min_length=1, description="비밀번호")


class PublicUser(BaseModel):
    """비밀번호 해시를 제외한 사용자 정보"""
    id: str
    email: str
    name: str


class SignupResponse(BaseModel):
    """회원가입 응답"""
    success: bool
    user: PublicUser


class LoginResponse(BaseModel):
    """로그인 응답"""
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    access_token: str = Field(alias="accessToken")
    token_type: str = Field(default="bearer", alias="tokenType")
    user: PublicUser


class PasswordChangeRequest(BaseModel):
    """비밀번호 변경 요청"""
    model_config = ConfigDict(populate_by_name=True)

    current_password: str = Field(..., alias="currentPassword")
    new_password: str = Field(..., alias="newPassword")
