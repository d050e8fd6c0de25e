"""Pydantic models for the intent and state endpoints."""

from typing import Annotated, Literal

from pydantic import Base64Bytes, BaseModel, ConfigDict, Field, RootModel

from mvi_users.domain.intents import (
    AddUser,
    CaptureImage,
    ClearUsers,
    LoadUsers,
    SearchUser,
    SelectImage,
    UndoDelete,
    UpdateEmail,
    UpdateName,
)


class LoadUsersRequest(BaseModel):
    """Reload the user list."""

    kind: Literal["load_users"]

    def to_intent(self) -> LoadUsers:
        return LoadUsers()


class AddUserRequest(BaseModel):
    """Create a user; ``image`` is base64-encoded."""

    kind: Literal["add_user"]
    name: str
    email: str
    image: Base64Bytes | None = None

    def to_intent(self) -> AddUser:
        return AddUser(name=self.name, email=self.email, image=self.image)


class DeleteUserRequest(BaseModel):
    """Delete the displayed user with ``user_id``."""

    kind: Literal["delete_user"]
    user_id: int


class ClearUsersRequest(BaseModel):
    """Delete every user."""

    kind: Literal["clear_users"]

    def to_intent(self) -> ClearUsers:
        return ClearUsers()


class SearchUserRequest(BaseModel):
    """Filter the displayed users."""

    kind: Literal["search_user"]
    query: str

    def to_intent(self) -> SearchUser:
        return SearchUser(self.query)


class UpdateNameRequest(BaseModel):
    """Name field edit."""

    kind: Literal["update_name"]
    name: str

    def to_intent(self) -> UpdateName:
        return UpdateName(self.name)


class UpdateEmailRequest(BaseModel):
    """Email field edit."""

    kind: Literal["update_email"]
    email: str

    def to_intent(self) -> UpdateEmail:
        return UpdateEmail(self.email)


class UndoDeleteRequest(BaseModel):
    """Restore the last deleted user."""

    kind: Literal["undo_delete"]

    def to_intent(self) -> UndoDelete:
        return UndoDelete()


class SelectImageRequest(BaseModel):
    """Gallery selection by reference."""

    kind: Literal["select_image"]
    ref: str

    def to_intent(self) -> SelectImage:
        return SelectImage(self.ref)


class CaptureImageRequest(BaseModel):
    """Camera capture; ``image`` is base64-encoded."""

    kind: Literal["capture_image"]
    image: Base64Bytes

    def to_intent(self) -> CaptureImage:
        return CaptureImage(self.image)


IntentPayload = Annotated[
    LoadUsersRequest
    | AddUserRequest
    | DeleteUserRequest
    | ClearUsersRequest
    | SearchUserRequest
    | UpdateNameRequest
    | UpdateEmailRequest
    | UndoDeleteRequest
    | SelectImageRequest
    | CaptureImageRequest,
    Field(discriminator="kind"),
]


class IntentRequest(RootModel[IntentPayload]):
    """Intent body tagged by ``kind``."""


class UserResponse(BaseModel):
    """User as rendered in the list."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    image_ref: str | None = None


class ViewStateResponse(BaseModel):
    """Current view state snapshot."""

    model_config = ConfigDict(from_attributes=True)

    is_loading: bool
    users: list[UserResponse]
    name: str
    email: str
    name_error: bool
    email_error: bool
    search_query: str
    selected_image_ref: str | None = None


class NotificationResponse(BaseModel):
    """One-shot notification."""

    model_config = ConfigDict(from_attributes=True)

    message: str
    action_label: str | None = None


class EffectsResponse(BaseModel):
    """Effects drained from the channel."""

    effects: list[NotificationResponse]
