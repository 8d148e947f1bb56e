"""App metadata and navigation routes.

The web client renders its layout and left sidebar from these.
"""

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter(tags=["navigation"])

APP_TITLE = "Threads"
APP_DESCRIPTION = "A Meta Threads Application"


class SidebarLink(BaseModel):
    """Sidebar entry."""

    label: str
    route: str
    img_url: str


SIDEBAR_LINKS: list[SidebarLink] = [
    SidebarLink(label="Home", route="/", img_url="/assets/home.svg"),
    SidebarLink(label="Search", route="/search", img_url="/assets/search.svg"),
    SidebarLink(label="Activity", route="/activity", img_url="/assets/heart.svg"),
    SidebarLink(
        label="Create Thread", route="/create-thread", img_url="/assets/create.svg"
    ),
    SidebarLink(
        label="Communities", route="/communities", img_url="/assets/community.svg"
    ),
    SidebarLink(label="Profile", route="/profile", img_url="/assets/user.svg"),
]


def is_active(pathname: str, route: str) -> bool:
    """Whether a sidebar route should be highlighted for the current path.

    "/" only matches itself; longer routes match any path containing them.
    """
    return (route in pathname and len(route) > 1) or pathname == route


class MetadataResponse(BaseModel):
    """Application metadata."""

    title: str
    description: str


class SidebarItem(SidebarLink):
    """Sidebar entry with its highlight state."""

    is_active: bool


class SidebarResponse(BaseModel):
    """Sidebar for a given path."""

    pathname: str
    links: list[SidebarItem]


@router.get("/meta", response_model=MetadataResponse)
async def get_metadata() -> MetadataResponse:
    """Title and description for the page head."""
    return MetadataResponse(title=APP_TITLE, description=APP_DESCRIPTION)


@router.get("/navigation/sidebar", response_model=SidebarResponse)
async def get_sidebar(pathname: str = "/") -> SidebarResponse:
    """Sidebar links with the active one flagged for ``pathname``."""
    return SidebarResponse(
        pathname=pathname,
        links=[
            SidebarItem(**link.model_dump(), is_active=is_active(pathname, link.route))
            for link in SIDEBAR_LINKS
        ],
    )
