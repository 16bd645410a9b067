# Calendar event CRUD
import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from learnpath.deps import get_db
from learnpath.db.models.event import Event
from learnpath.events.schemas import EventIn, EventOut

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/events")


def utc_day_bounds(now: datetime | None = None) -> tuple[datetime, datetime]:
    now = now or datetime.now(timezone.utc)
    start = now.astimezone(timezone.utc).replace(hour=0, minute=0, second=0, microsecond=0)
    return start, start + timedelta(days=1)


def _to_out(ev: Event) -> EventOut:
    return EventOut(id=ev.id, title=ev.title, start=ev.start, end=ev.end, created_at=ev.created_at)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=EventOut)
def create_event(body: EventIn, db: Session = Depends(get_db)):
    ev = Event(title=body.title.strip(), start=body.start, end=body.end)
    db.add(ev)
    db.commit()
    db.refresh(ev)
    return _to_out(ev)


@router.get("/today", response_model=List[EventOut])
def events_today(db: Session = Depends(get_db)):
    day_start, day_end = utc_day_bounds()
    items = (
        db.query(Event)
        .filter(Event.start >= day_start, Event.start < day_end)
        .order_by(Event.start)
        .all()
    )
    return [_to_out(ev) for ev in items]


@router.get("", response_model=List[EventOut])
def list_events(db: Session = Depends(get_db)):
    return [_to_out(ev) for ev in db.query(Event).order_by(Event.start).all()]


@router.delete("/{event_id}")
def delete_event(event_id: uuid.UUID, db: Session = Depends(get_db)):
    ev = db.query(Event).filter(Event.id == event_id).first()
    if not ev:
        raise HTTPException(status_code=404, detail="Event not found")
    db.delete(ev)
    db.commit()
    logger.info("Deleted event %s", event_id)
    return {"message": "Event deleted"}
