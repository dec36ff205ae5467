"""Inbox message model."""

from __future__ import annotations

from pydantic import AwareDatetime, BaseModel, Field

from mojvis.models.enums import Language, Tag


class LocalizedText(BaseModel):
    """Title and body resolved for a single language."""

    title: str
    body: str
    language: Language


class InboxMessage(BaseModel):
    """An inbox message as read from storage.

    Tags are kept as raw strings so that legacy or corrupt rows still load;
    the eligibility rules decide what an unknown tag means.

    All instants must be timezone-aware; naive values fail validation.

    Soft delete policy: rows are never hard-deleted. A non-null
    ``deleted_at`` removes the message from every public read path.

    Push policy: once a push has been sent the storage layer sets
    ``is_locked`` together with ``pushed_at``/``pushed_by`` and refuses
    further edits.
    """

    id: str = Field(description="Unique identifier for the message")
    title_hr: str = Field(description="Croatian title")
    body_hr: str = Field(description="Croatian body")
    title_en: str | None = Field(default=None, description="English title")
    body_en: str | None = Field(default=None, description="English body")
    tags: list[str] = Field(default_factory=list, description="Tags from the fixed taxonomy")
    active_from: AwareDatetime | None = Field(
        default=None, description="Start of the banner/push window (inclusive)"
    )
    active_to: AwareDatetime | None = Field(
        default=None, description="End of the banner/push window (inclusive)"
    )
    created_at: AwareDatetime | None = None
    updated_at: AwareDatetime | None = None
    created_by: str | None = Field(default=None, description="Admin user ID")
    deleted_at: AwareDatetime | None = Field(
        default=None, description="Soft-delete timestamp (None = active)"
    )
    is_locked: bool = Field(default=False, description="True once a push was sent")
    pushed_at: AwareDatetime | None = None
    pushed_by: str | None = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def is_urgent(self) -> bool:
        return Tag.URGENT in self.tags

    @property
    def has_english(self) -> bool:
        return bool(self.title_en) and bool(self.body_en)

    def localized(self, language: Language | str = Language.HR) -> LocalizedText:
        """Return title and body in *language*, falling back to Croatian."""
        if Language(language) is Language.EN and self.has_english:
            return LocalizedText(
                title=self.title_en or "", body=self.body_en or "", language=Language.EN
            )
        return LocalizedText(title=self.title_hr, body=self.body_hr, language=Language.HR)
