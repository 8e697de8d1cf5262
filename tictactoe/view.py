"""
Presentation for the game.

Everything here is a pure function of the session: `render_page` builds the
page as a tree of `Node`s, `to_html` serializes that tree, `render_text` draws
the board for terminals and `state_payload` is what the JSON API returns.
"""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from typing import Dict, List, Tuple, Union

from .board import Mark, Status
from .state import GameState, Session, Theme


TITLE = "Tic-Tac-Toe"
MOVE_PATH = "/move/{index}"
RESET_PATH = "/reset"
THEME_PATH = "/theme"

VOID_TAGS = frozenset({"meta", "link", "br", "hr", "img", "input"})

STYLE = """
:root {
  --primary-color: #1976d2;
  --secondary-color: #424242;
  --accent-color: #ffca28;
  --bg-color: #f5f7fa;
  --surface-color: #ffffff;
  --text-color: #212121;
  --border-color: #d0d7de;
}
[data-theme="dark"] {
  --primary-color: #64b5f6;
  --secondary-color: #bdbdbd;
  --accent-color: #ffca28;
  --bg-color: #121212;
  --surface-color: #1e1e1e;
  --text-color: #eeeeee;
  --border-color: #3a3a3a;
}
* { box-sizing: border-box; }
body {
  margin: 0;
  font-family: system-ui, -apple-system, "Segoe UI", sans-serif;
  background: var(--bg-color);
  color: var(--text-color);
}
form { margin: 0; }
.ttt-header {
  min-height: 100vh;
  display: flex;
  flex-direction: column;
  align-items: center;
  justify-content: center;
  position: relative;
}
.theme-toggle {
  position: absolute;
  top: 1rem;
  right: 1rem;
  padding: 0.4rem 0.9rem;
  border-radius: 8px;
  border: 1px solid var(--border-color);
  background: var(--surface-color);
  color: var(--text-color);
  cursor: pointer;
}
.ttt-container {
  background: var(--surface-color);
  border-radius: 16px;
  padding: 2rem 2.5rem;
  box-shadow: 0 8px 24px rgba(0, 0, 0, 0.12);
  text-align: center;
}
.ttt-title { margin: 0 0 1rem; color: var(--primary-color); }
.ttt-status { font-size: 1.2rem; margin-bottom: 1rem; color: var(--secondary-color); }
.ttt-status span { font-weight: 700; color: var(--primary-color); }
.ttt-status.winner span { color: var(--accent-color); }
.ttt-board { display: inline-block; }
.ttt-board-row { display: flex; }
.ttt-square {
  width: 80px;
  height: 80px;
  margin: 3px;
  font-size: 2rem;
  font-weight: 700;
  border: 2px solid var(--border-color);
  border-radius: 8px;
  background: var(--surface-color);
  color: var(--text-color);
  cursor: pointer;
}
.ttt-square.highlight {
  background: var(--accent-color);
  border-color: var(--accent-color);
  color: #212121;
}
.ttt-reset-btn {
  margin-top: 1.5rem;
  padding: 0.6rem 1.6rem;
  border: none;
  border-radius: 8px;
  background: var(--primary-color);
  color: #ffffff;
  font-size: 1rem;
  cursor: pointer;
}
"""


Child = Union["Node", str]


@dataclass
class Node:
    tag: str
    attrs: Dict[str, Union[str, bool, None]] = field(default_factory=dict)
    children: List[Child] = field(default_factory=list)


def status_text(game: GameState) -> Tuple[str, str]:
    """Return the status line as (kind, text) where kind is winner, draw or turn."""
    outcome = game.outcome
    if outcome.status is Status.WON:
        return "winner", f"Winner: {outcome.winner.value}"
    if outcome.status is Status.DRAW:
        return "draw", "It's a Draw!"
    return "turn", f"Turn: {game.next_player.value}"


def theme_toggle_label(theme: Theme) -> Tuple[str, str]:
    """Button text and aria-label offering the other theme."""
    if theme is Theme.LIGHT:
        return "🌙 Dark", "Switch to dark mode"
    return "☀️ Light", "Switch to light mode"


def render_status(game: GameState) -> Node:
    kind, text = status_text(game)
    if kind == "draw":
        return Node("div", {"class": "ttt-status draw"}, [text])
    label, _, value = text.partition(": ")
    return Node("div", {"class": f"ttt-status {kind}"}, [f"{label}: ", Node("span", {}, [value])])


def render_square(index: int, mark: Mark, highlight: bool) -> Node:
    classes = "ttt-square highlight" if highlight else "ttt-square"
    return Node(
        "button",
        {
            "type": "submit",
            "class": classes,
            "formaction": MOVE_PATH.format(index=index),
            "aria-label": f"square with {mark.value}" if mark is not Mark.EMPTY else "empty square",
            "data-index": str(index),
        },
        [mark.value],
    )


def render_board(game: GameState) -> Node:
    line = set(game.winning_line)
    rows = []
    for row in range(3):
        squares = [render_square(row * 3 + col, game.board[row * 3 + col], row * 3 + col in line) for col in range(3)]
        rows.append(Node("div", {"class": "ttt-board-row"}, squares))
    return Node("form", {"class": "ttt-board", "method": "post"}, rows)


def render_page(session: Session) -> Node:
    game = session.game
    toggle_text, toggle_label = theme_toggle_label(session.theme)

    head = Node(
        "head",
        {},
        [
            Node("meta", {"charset": "utf-8"}),
            Node("meta", {"name": "viewport", "content": "width=device-width, initial-scale=1"}),
            Node("title", {}, [TITLE]),
            Node("style", {}, [STYLE]),
        ],
    )
    theme_form = Node(
        "form",
        {"method": "post", "action": THEME_PATH},
        [Node("button", {"type": "submit", "class": "theme-toggle", "aria-label": toggle_label}, [toggle_text])],
    )
    reset_form = Node(
        "form",
        {"method": "post", "action": RESET_PATH},
        [Node("button", {"type": "submit", "class": "ttt-reset-btn"}, ["Reset Game"])],
    )
    container = Node(
        "div",
        {"class": "ttt-container"},
        [
            Node("h1", {"class": "ttt-title"}, [TITLE]),
            Node("div", {"class": "ttt-controls"}, [render_status(game)]),
            render_board(game),
            reset_form,
        ],
    )
    body = Node(
        "body",
        {},
        [Node("div", {"class": "App ttt-app-bg"}, [Node("header", {"class": "App-header ttt-header"}, [theme_form, container])])],
    )
    return Node("html", {"lang": "en", "data-theme": session.theme.value}, [head, body])


def _render_attrs(attrs: Dict[str, Union[str, bool, None]]) -> str:
    parts = []
    for name, value in attrs.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {name}")
        else:
            parts.append(f' {name}="{html.escape(str(value), quote=True)}"')
    return "".join(parts)


def to_html(node: Child) -> str:
    if isinstance(node, str):
        return html.escape(node, quote=False)
    opening = f"<{node.tag}{_render_attrs(node.attrs)}>"
    if node.tag in VOID_TAGS:
        return opening
    if node.tag in ("style", "script"):
        inner = "".join(child if isinstance(child, str) else to_html(child) for child in node.children)
    else:
        inner = "".join(to_html(child) for child in node.children)
    html_text = f"{opening}{inner}</{node.tag}>"
    if node.tag == "html":
        return "<!DOCTYPE html>\n" + html_text
    return html_text


def render_text(game: GameState, show_indices: bool = False) -> str:
    rows = []
    for h in range(3):
        row = []
        for w in range(3):
            index = h * 3 + w
            value = game.board[index].value
            if value == "":
                value = str(index) if show_indices else " "
            row.append(value)
        rows.append(" " + " | ".join(row))
    return "\n---+---+---\n".join(rows)


def state_payload(session: Session) -> Dict[str, object]:
    game = session.game
    outcome = game.outcome
    payload: Dict[str, object] = {
        "board": [mark.value for mark in game.board],
        "next_player": game.next_player.value,
        "status": outcome.status.value,
        "winner": outcome.winner.value if outcome.winner is not None else None,
        "line": list(outcome.line),
        "theme": session.theme.value,
        "status_text": status_text(game)[1],
    }
    return payload
