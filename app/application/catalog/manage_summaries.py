"""
Use cases: Save, list, read and delete summaries.

Input: SaveSummaryCommand, ListSummariesQuery, summary ids.
Output: Summary entities, SummaryPage, saved ids.
Side effects: Writes to the summary repository.
Failure cases: MissingIdentifierError, RecordNotFoundError, RepositoryError.
"""

import logging

from app.application.catalog._ids import resolve_id
from app.application.catalog.dtos import ListSummariesQuery, SaveSummaryCommand
from app.domain.catalog.entities import Summary, SummaryListOptions, SummaryPage
from app.domain.catalog.ports import SummaryRepository

logger = logging.getLogger(__name__)


class ManageSummariesUseCase:
    """Orchestrates summary CRUD over the SummaryRepository port."""

    def __init__(self, summary_repo: SummaryRepository) -> None:
        self._summary_repo = summary_repo

    def save(self, command: SaveSummaryCommand) -> str:
        """Create or update a summary and return its id."""
        summary_id = resolve_id("Summary", command.id, command.is_update)
        self._summary_repo.save(
            Summary(
                id=summary_id,
                title=command.title,
                description=command.description,
                content=command.content,
                user_id=command.user_id,
                category_id=command.category_id,
                subcategory_id=command.subcategory_id,
            )
        )
        return summary_id

    def list(self, query: ListSummariesQuery) -> SummaryPage:
        """Return one page of summaries matching the query filters."""
        logger.info(
            "Listing summaries category_id=%s subcategory_id=%s limit=%d offset=%d",
            query.category_id,
            query.subcategory_id,
            query.limit,
            query.offset,
        )
        return self._summary_repo.list(
            SummaryListOptions(
                category_id=query.category_id,
                subcategory_id=query.subcategory_id,
                limit=query.limit,
                offset=query.offset,
            )
        )

    def detail(self, summary_id: str) -> Summary:
        return self._summary_repo.detail(summary_id)

    def delete(self, summary_id: str) -> None:
        logger.info("Deleting summary id=%s", summary_id)
        self._summary_repo.delete(summary_id)
