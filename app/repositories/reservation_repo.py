# app/repositories/reservation_repo.py
import uuid

from sqlmodel import Session, select

from app.models.reservation import Reservation


class ReservationRepository:

    # Lookups
    def list_all(self, session: Session) -> list[Reservation]:
        stmt = select(Reservation).order_by(Reservation.created_at)
        return list(session.exec(stmt).all())

    def get_for_user_and_item(
        self, session: Session, user_id: uuid.UUID, gift_item_id: uuid.UUID
    ) -> Reservation | None:
        stmt = select(Reservation).where(
            Reservation.user_id == user_id,
            Reservation.gift_item_id == gift_item_id,
        )
        return session.exec(stmt).first()

    # CRUD
    def create(self, session: Session, reservation: Reservation) -> Reservation:
        session.add(reservation)
        session.commit()
        session.refresh(reservation)
        return reservation

    def update(self, session: Session, reservation: Reservation) -> Reservation:
        session.add(reservation)
        session.commit()
        session.refresh(reservation)
        return reservation

    def delete(self, session: Session, reservation: Reservation) -> None:
        session.delete(reservation)
        session.commit()
