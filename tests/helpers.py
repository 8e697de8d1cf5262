from tictactoe.board import BOARD_SIZE, Mark
from tictactoe.view import Node


def board_from_string(text):
    """Build a board from 9 characters of X, O and '.' for empty."""
    assert len(text) == BOARD_SIZE
    mapping = {"X": Mark.X, "O": Mark.O, ".": Mark.EMPTY}
    return tuple(mapping[ch] for ch in text)


def find_all(node, class_name):
    """Every node in the tree (root included) whose class list holds `class_name`."""
    found = []
    if class_name in str(node.attrs.get("class") or "").split():
        found.append(node)
    for child in node.children:
        if isinstance(child, Node):
            found.extend(find_all(child, class_name))
    return found


def text_of(node):
    return "".join(child if isinstance(child, str) else text_of(child) for child in node.children)
