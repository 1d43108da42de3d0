"""Pydantic records for paste site pages."""

from __future__ import annotations

from pydantic import Field

from pasteparse.common.data_models import ExtractedData


class SimpleUser(ExtractedData):
    """The author block shown next to a paste or comment."""

    username: str = Field("", description="Display name, empty if absent")
    registered: bool = Field(False, description="Username is a profile link")
    pro: bool = Field(False, description="A PRO badge is shown")
    icon_url: str = Field("", description="Avatar path under /imgs/")


class UserPaste(ExtractedData):
    """One row of a profile's paste table."""

    id: str = ""
    title: str = ""
    age: str = ""
    expires: str = ""
    views: int = 0
    num_comments: int = 0
    format: str = ""


class User(ExtractedData):
    """A user profile page."""

    username: str = ""
    icon_url: str = ""
    website: str | None = None
    location: str | None = None
    profile_views: int = 0
    paste_views: int = 0
    rating: float = 0.0
    date_joined: int = Field(0, description="Unix timestamp, 0 if unknown")
    pro: bool = False
    pastes: tuple[UserPaste, ...] = ()


class PasteContainer(ExtractedData):
    """A rendered code block with its info bar."""

    category: str | None = None
    size: int = Field(0, description="Size in bytes, 0 if unparsable")
    likes: int | None = None
    dislikes: int | None = None
    id: str | None = Field(None, description="Id taken from the report link")
    format: str = Field("text", description="Syntax highlighting id")
    format_name: str = Field("Plain Text", description="Syntax display name")
    content: str = ""


class Comment(ExtractedData):
    """A comment on a paste. Comments are pastes themselves."""

    author: SimpleUser
    date: int = 0
    edit_date: int | None = None
    container: PasteContainer
    num_comments: int = 0


class Paste(ExtractedData):
    """A paste page with its comments."""

    id: str
    title: str | None = Field(
        None, description="None when the page is a comment on another paste"
    )
    tags: tuple[str, ...] = ()
    container: PasteContainer
    author: SimpleUser
    date: int = 0
    edit_date: int | None = None
    views: int = 0
    rating: float = 0.0
    expire: str = ""
    comment_for: str | None = Field(
        None, description="Id of the paste this one comments on"
    )
    unlisted: bool = False
    num_comments: int | None = Field(
        None, description="None when the comment counter is not rendered"
    )
    comments: tuple[Comment, ...] = ()
    locked: bool = Field(False, description="True iff num_comments is None")


class Archive(ExtractedData):
    """One row of the public archive listing."""

    id: str = ""
    title: str = ""
    age: str = ""
    format: str = ""


class ArchivePage(ExtractedData):
    """The public archive listing, optionally filtered by format."""

    format: str | None = None
    archives: tuple[Archive, ...] = ()


class PasteProtection(ExtractedData):
    """Access markers found on a paste page before it can be viewed."""

    locked: bool = Field(False, description="Password form is shown")
    burn: bool = Field(False, description="Burn-after-read notice is shown")
    csrf_token: str | None = None
