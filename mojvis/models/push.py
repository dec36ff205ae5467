"""Push notification target and payload models."""

from pydantic import BaseModel, ConfigDict, Field

from mojvis.models.enums import Language, Municipality, ViewerMode


class PushContent(BaseModel):
    """Notification payload for one language.

    ``inbox_message_id`` travels in the notification data so that opening
    the notification opens the message.
    """

    title: str
    body: str
    inbox_message_id: str = Field(description="ID of the inbox message being pushed")

    model_config = ConfigDict(frozen=True)


class PushTarget(BaseModel):
    """A device registered for push notifications."""

    device_id: str = Field(description="Anonymous device identifier")
    push_token: str = Field(description="Provider push token")
    locale: Language = Field(default=Language.HR, description="Device notification language")
    push_opt_in: bool = Field(default=True, description="False once the user turned push off")
    mode: ViewerMode | None = Field(
        default=None, description="User mode reported at registration, if known"
    )
    municipality: Municipality | None = Field(
        default=None, description="Municipality reported at registration, if known"
    )

    model_config = ConfigDict(frozen=True)
