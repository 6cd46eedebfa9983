"""Text form of a goal's steps for the edit textarea.

One step per line, finished steps prefixed with ``[x] ``. Newlines and
backslashes inside a title are escaped so a step always stays on one line.
"""
import re
from typing import List, Optional

from goal_tracker.schemas.goal import GoalStep

DONE_MARK = "[x] "

_ESCAPE = re.compile(r"\\(\\|n)")

def escape_title(title: str) -> str:
    title = title.replace("\r\n", "\n").replace("\r", "\n")
    return title.replace("\\", "\\\\").replace("\n", "\\n")

def unescape_title(text: str) -> str:
    return _ESCAPE.sub(lambda m: "\n" if m.group(1) == "n" else "\\", text)

def steps_to_text(steps) -> str:
    return "\n".join(f"{DONE_MARK if step.done else ''}{escape_title(step.title)}" for step in steps)

def text_to_steps(text: str, previous: Optional[List[GoalStep]] = None) -> List[GoalStep]:
    """Parse the textarea back into steps.

    Extra keys of a previous step with the same title are carried over.
    """
    unmatched = list(previous or [])
    steps = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        done = line.lower().startswith(DONE_MARK)
        title = unescape_title(line[len(DONE_MARK):].strip() if done else line)

        extra = {}
        for index, old in enumerate(unmatched):
            if old.title == title:
                extra = dict(old.model_extra or {})
                del unmatched[index]
                break
        steps.append(GoalStep(**{**extra, "title": title, "done": done}))
    return steps

def edited_steps(steps: List[GoalStep], text: str) -> List[GoalStep]:
    """Steps after an edit: untouched text keeps the original steps as they are."""
    if text == steps_to_text(steps):
        return list(steps)
    return text_to_steps(text, steps)
