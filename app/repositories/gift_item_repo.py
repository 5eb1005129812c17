# app/repositories/gift_item_repo.py
import uuid

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.gift_item import GiftItem


class GiftItemRepository:
    """
    Data access layer for GiftItem.

    - Pure DB operations (CRUD + queries).
    - No FastAPI, no business logic.
    """

    def get_by_id(self, session: Session, item_id: uuid.UUID) -> GiftItem | None:
        return session.get(GiftItem, item_id)

    def list_ordered(self, session: Session) -> list[GiftItem]:
        stmt = select(GiftItem).order_by(GiftItem.position)
        return list(session.exec(stmt).all())

    def count(self, session: Session) -> int:
        stmt = select(func.count()).select_from(GiftItem)
        value = session.exec(stmt).one()
        return int(value or 0)

    def max_position(self, session: Session) -> int:
        """Highest display position in use, 0 for an empty catalog."""
        stmt = select(func.coalesce(func.max(GiftItem.position), 0))
        value = session.exec(stmt).one()
        return int(value or 0)

    def create(self, session: Session, item: GiftItem) -> GiftItem:
        session.add(item)
        session.commit()
        session.refresh(item)
        return item

    def create_many(self, session: Session, items: list[GiftItem]) -> None:
        """Insert a batch of items in a single commit."""
        for item in items:
            session.add(item)
        session.commit()
