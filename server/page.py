import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from tictactoe.state import Session
from tictactoe.view import MOVE_PATH, RESET_PATH, THEME_PATH, render_page, to_html


router = APIRouter()
logger = logging.getLogger(__name__)


def get_session(request: Request) -> Session:
    return request.app.state.session


def back_to_page():
    return RedirectResponse("/", status_code=303)


@router.get("/", response_class=HTMLResponse)
async def index(session: Session = Depends(get_session)):
    return to_html(render_page(session))


@router.post(MOVE_PATH)
async def move(index: int, session: Session = Depends(get_session)):
    # Rejected moves just redraw the same page.
    if not session.move(index):
        logger.debug("Page move %d ignored.", index)
    return back_to_page()


@router.post(RESET_PATH)
async def reset(session: Session = Depends(get_session)):
    session.reset()
    return back_to_page()


@router.post(THEME_PATH)
async def toggle_theme(session: Session = Depends(get_session)):
    session.toggle_theme()
    return back_to_page()
