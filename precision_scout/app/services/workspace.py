"""
Workspace Service Module

User-owned sourcing state kept in the JSON storage: custom companies,
lists, saved searches and per-company notes.
"""

import re
import secrets
import string
from typing import Dict, List, Optional

from ..db.companies import COMPANIES, get_mock_company
from ..db.schemas import (
    Company,
    CompanyCreate,
    CompanyList,
    CompanyListDetail,
    SavedSearch,
    SavedSearchCreate,
)
from ..utils.dates import utc_now_iso
from ..utils.logger import storage_logger as logger
from ..utils.storage import StorageService
from .companies import CompanySearchParams
from .scraper import normalize_website

LISTS = "lists"
SAVED_SEARCHES = "saved_searches"
NOTES = "notes"
CUSTOM_COMPANIES = "custom_companies"

CUSTOM_DESCRIPTION = "Custom website added manually for on-the-fly enrichment."

_ID_ALPHABET = string.ascii_lowercase + string.digits
_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def random_suffix(length: int) -> str:
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(length))


def slugify(value: str) -> str:
    return _NON_ALNUM.sub("-", value.lower()).strip("-")


class WorkspaceService:
    """Reads and writes workspace collections through StorageService."""

    def __init__(self, storage: Optional[StorageService] = None):
        self.storage = storage or StorageService()

    # Companies
    def custom_companies(self) -> List[Company]:
        return [Company.model_validate(c) for c in self.storage.load_collection(CUSTOM_COMPANIES, [])]

    def all_companies(self) -> List[Company]:
        return [*COMPANIES, *self.custom_companies()]

    def get_company(self, company_id: str) -> Optional[Company]:
        company = get_mock_company(company_id)
        if company:
            return company
        return next((c for c in self.custom_companies() if c.id == company_id), None)

    def add_custom_company(self, data: CompanyCreate) -> Company:
        """Add a website as a local-only company, ready for enrichment."""
        id_base = slugify(data.name) or slugify(data.website)
        company = Company(
            id=f"custom-{id_base}-{random_suffix(4)}",
            name=data.name,
            website=normalize_website(data.website),
            industry="Custom",
            stage="Bootstrapped",
            thesis_tags=[],
            location="Unknown",
            description=(data.description or "").strip() or CUSTOM_DESCRIPTION,
        )
        stored = self.storage.load_collection(CUSTOM_COMPANIES, [])
        stored.append(company.model_dump(by_alias=True))
        self.storage.save_collection(CUSTOM_COMPANIES, stored)
        logger.info(f"Added custom company {company.id}")
        return company

    # Lists
    def get_lists(self) -> List[CompanyList]:
        return [CompanyList.model_validate(item) for item in self.storage.load_collection(LISTS, [])]

    def get_lists_with_companies(self) -> List[CompanyListDetail]:
        """Lists with ids resolved to companies; ids no longer in the universe are dropped."""
        companies = {company.id: company for company in self.all_companies()}
        return [
            CompanyListDetail(
                **company_list.model_dump(),
                companies=[companies[cid] for cid in company_list.company_ids if cid in companies],
            )
            for company_list in self.get_lists()
        ]

    def _save_lists(self, lists: List[CompanyList]) -> None:
        self.storage.save_collection(LISTS, [item.model_dump(by_alias=True) for item in lists])

    def create_list(self, name: str) -> CompanyList:
        now = utc_now_iso()
        company_list = CompanyList(
            id=f"list-{now}-{random_suffix(6)}",
            name=name.strip(),
            created_at=now,
            company_ids=[],
        )
        self._save_lists([*self.get_lists(), company_list])
        logger.info(f"Created list {company_list.id}")
        return company_list

    def delete_list(self, list_id: str) -> bool:
        lists = self.get_lists()
        remaining = [item for item in lists if item.id != list_id]
        if len(remaining) == len(lists):
            return False
        self._save_lists(remaining)
        return True

    def toggle_company_in_list(self, list_id: str, company_id: str) -> Optional[CompanyList]:
        """Add the company to the list, or remove it if already there. None if the list is unknown."""
        lists = self.get_lists()
        target = next((item for item in lists if item.id == list_id), None)
        if target is None:
            return None

        if company_id in target.company_ids:
            target.company_ids = [cid for cid in target.company_ids if cid != company_id]
        else:
            target.company_ids = [*target.company_ids, company_id]
        self._save_lists(lists)
        return target

    def lists_containing(self, company_id: str) -> List[str]:
        return [item.id for item in self.get_lists() if company_id in item.company_ids]

    # Saved searches
    def get_saved_searches(self) -> List[SavedSearch]:
        return [SavedSearch.model_validate(item) for item in self.storage.load_collection(SAVED_SEARCHES, [])]

    def get_saved_search(self, search_id: str) -> Optional[SavedSearch]:
        return next((s for s in self.get_saved_searches() if s.id == search_id), None)

    def create_saved_search(self, data: SavedSearchCreate) -> SavedSearch:
        now = utc_now_iso()
        search = SavedSearch(
            id=f"search-{now}-{random_suffix(6)}",
            name=data.name,
            query=data.query,
            industry=data.industry,
            stage=data.stage,
            tags=data.tags or None,
            created_at=now,
        )
        searches = self.get_saved_searches()
        searches.append(search)
        self.storage.save_collection(SAVED_SEARCHES, [s.model_dump(by_alias=True) for s in searches])
        logger.info(f"Saved search {search.id}")
        return search

    def delete_saved_search(self, search_id: str) -> bool:
        searches = self.get_saved_searches()
        remaining = [s for s in searches if s.id != search_id]
        if len(remaining) == len(searches):
            return False
        self.storage.save_collection(SAVED_SEARCHES, [s.model_dump(by_alias=True) for s in remaining])
        return True

    @staticmethod
    def to_search_params(search: SavedSearch, page: int = 1) -> CompanySearchParams:
        return CompanySearchParams(
            q=search.query,
            industry=search.industry or "All",
            stage=search.stage or "Any",
            tags=search.tags or [],
            page=page,
        )

    # Notes
    def get_notes(self, company_id: str) -> str:
        notes: Dict[str, str] = self.storage.load_collection(NOTES, {})
        return notes.get(company_id, "")

    def set_notes(self, company_id: str, text: str) -> str:
        notes: Dict[str, str] = self.storage.load_collection(NOTES, {})
        notes[company_id] = text
        self.storage.save_collection(NOTES, notes)
        return text
