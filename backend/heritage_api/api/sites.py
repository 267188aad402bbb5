from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field
from sqlmodel import Session

from heritage_api.database import get_session
from heritage_api.models.site import HeritageSite
from heritage_api.services.sites import SiteCatalog

router = APIRouter(prefix="/sites", tags=["sites"])


class SiteSummary(BaseModel):
    id: int
    name: str
    description: str
    location: str
    img: str


class SiteResponse(SiteSummary):
    country_name: str = Field(serialization_alias="countryName")


def get_site_catalog(session: Session = Depends(get_session)) -> SiteCatalog:
    return SiteCatalog(session)


@router.get("")
def list_sites(
    country: str | None = Query(default=None),
    catalog: SiteCatalog = Depends(get_site_catalog),
):
    sites = catalog.list_by_country(country)
    summaries = [
        SiteSummary.model_validate(s, from_attributes=True).model_dump()
        for s in sites
    ]
    return {"success": True, "body": summaries}


@router.get("/{location}")
def get_sites_by_location(
    location: str,
    catalog: SiteCatalog = Depends(get_site_catalog),
):
    sites = catalog.get_by_location(location)
    return {"success": True, "body": [_full(s) for s in sites]}


def _full(site: HeritageSite) -> dict:
    return SiteResponse.model_validate(site, from_attributes=True).model_dump(
        by_alias=True
    )
