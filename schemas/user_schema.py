from pydantic import BaseModel, Field

from model.user import UserRole


class Identity(BaseModel):
    """The caller on whose behalf a store call runs. Passed explicitly, never global."""
    principal: str | None = None
    role: UserRole = UserRole.GUEST

    class Config:
        frozen = True

    @classmethod
    def anonymous(cls) -> "Identity":
        return cls()

    @property
    def is_anonymous(self) -> bool:
        return self.principal is None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


class UserProfileRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)


class UserProfileSchema(BaseModel):
    principal: str
    name: str

    class Config:
        from_attributes = True


class RoleSchema(BaseModel):
    role: UserRole


class AdminStatusSchema(BaseModel):
    is_admin: bool
