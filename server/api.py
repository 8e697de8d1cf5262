from typing import Literal, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, field_validator

from tictactoe.state import Session
from tictactoe.view import state_payload

from .page import get_session


router = APIRouter(prefix="/api")


class MovePayload(BaseModel):
    index: int

    @field_validator("index", mode="before")
    @classmethod
    def validate_index(cls, value):
        # Range is not checked here: out-of-range moves are ignored by the game.
        if type(value) is not int:
            raise ValueError("must be an integer")
        return value


class ThemePayload(BaseModel):
    theme: Literal["light", "dark"] | None = None

    @field_validator("theme", mode="before")
    @classmethod
    def validate_and_normalize_theme(cls, value):
        if value is None:
            return None
        if not isinstance(value, str):
            raise ValueError("must be a string")
        return value.strip().lower()


@router.get("/state")
async def get_state(session: Session = Depends(get_session)):
    return state_payload(session)


@router.post("/move")
async def move(payload: MovePayload, session: Session = Depends(get_session)):
    accepted = session.move(payload.index)
    response = state_payload(session)
    response["accepted"] = accepted
    return response


@router.post("/reset")
async def reset(session: Session = Depends(get_session)):
    session.reset()
    return state_payload(session)


@router.post("/theme")
async def theme(payload: Optional[ThemePayload] = None, session: Session = Depends(get_session)):
    if payload is None or payload.theme is None:
        session.toggle_theme()
    else:
        session.set_theme(payload.theme)
    return state_payload(session)
