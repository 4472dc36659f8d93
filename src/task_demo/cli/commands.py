# src/task_demo/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from typing import cast

from ..core.state import AppState
from ..credentials.store import SecretStoreError
from ..tasks.task_codec import dumps_tasks
from ..tasks.task_models import Priority, Task

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._raw: set[CommandHandler] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        raw: bool = False,
    ) -> None:
        """
        raw=True: the handler gets the untouched argument text as a single
        element (or an empty list), so inner whitespace survives.
        """
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler
        if raw:
            self._raw.add(handler)

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        rest = parts[1].strip() if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        if handler in self._raw:
            args = [rest] if rest else []
        else:
            args = rest.split()

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering / parsing helpers ----


def format_task_line(pos: int, task: Task) -> str:
    mark = "x" if task.is_completed else " "
    extra = task.priority.value
    if task.due_date is not None:
        extra += f", due {task.due_date.date().isoformat()}"
    return f"{pos:>3}. [{mark}] {task.title}  ({extra})"


def render_tasks(state: AppState) -> str:
    view = state.visible_tasks()
    if state.search_text:
        header = f'Tasks matching "{state.search_text}" ({len(view)} of {len(state.task_list)}):'
    else:
        header = f"Tasks ({len(view)}):"
    if not view:
        return header + "\n  (none)"
    return "\n".join([header] + [format_task_line(i, t) for i, t in enumerate(view, start=1)])


def parse_positions(args: Sequence[str], size: int) -> list[int]:
    """Turn 1-based position strings into 0-based offsets. Raises ValueError on bad input."""
    out: list[int] = []
    for a in args:
        try:
            n = int(a)
        except ValueError:
            raise ValueError(f"Not a position: {a!r}") from None
        if not 1 <= n <= size:
            raise ValueError(f"Position {n} is out of range (1..{size}).")
        out.append(n - 1)
    return out


def parse_due_date(raw: str) -> datetime:
    try:
        due = datetime.strptime(raw, "%Y-%m-%d").replace(tzinfo=UTC)
    except ValueError:
        raise ValueError(f"Bad due date {raw!r}; expected YYYY-MM-DD.") from None
    if due.date() < datetime.now(UTC).date():
        raise ValueError("Due date cannot be in the past.")
    return due


def build_task_from_args(args: Sequence[str]) -> Task:
    """
    Parse `[--priority P] [--due YYYY-MM-DD] title words...` into a Task.

    The title is trimmed and must not be blank.
    """
    priority = Priority.MEDIUM
    due_date: datetime | None = None
    words: list[str] = []

    it = iter(args)
    for a in it:
        if a in ("--priority", "-p"):
            val = next(it, None)
            if val is None:
                raise ValueError("--priority needs a value (low|medium|high).")
            priority = Priority.parse(val)
        elif a in ("--due", "-d"):
            val = next(it, None)
            if val is None:
                raise ValueError("--due needs a value (YYYY-MM-DD).")
            due_date = parse_due_date(val)
        else:
            words.append(a)

    title = " ".join(words).strip()
    if not title:
        raise ValueError("Task title must not be empty.")
    return Task(title=title, priority=priority, due_date=due_date)


# ---- handlers ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help() + "\n  /exit - Quit.\nAny other text adds a task with that title."


def cmd_status(state: AppState, args: list[str]) -> str:
    s = state.settings
    build = getattr(s, "build_configuration", "debug")
    api_key = getattr(s, "api_key", None)
    search = state.search_text or "(none)"
    return (
        "Status:\n"
        f"  App: {getattr(s, 'app_name', 'task_demo')}\n"
        f"  Build: {build} (CI: {'yes' if getattr(s, 'is_ci', False) else 'no'})\n"
        f"  API base URL: {getattr(s, 'api_base_url', '')}\n"
        f"  API key: {'set' if api_key else 'not set'}\n"
        f"  Secret store: {type(state.secret_store).__name__}\n"
        f"  Search: {search}"
    )


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_tasks(state)


def cmd_search(state: AppState, args: list[str]) -> str:
    """
    /search text  -> show only tasks whose title contains text
    /search       -> clear the search
    """
    state.search_text = args[0] if args else ""
    logger.debug("Search text set to %r", state.search_text)
    return render_tasks(state)


def quick_add(state: AppState, text: str) -> str:
    """Add a task titled `text` (trimmed) with default priority; no option parsing."""
    title = text.strip()
    if not title:
        return "Task title must not be empty."
    task = state.task_list.add(Task(title=title))
    logger.info("Task quick-added id=%s", task.id)
    return f"Added: {task.title} ({task.priority.value})"


def cmd_add(state: AppState, args: list[str]) -> str:
    try:
        task = build_task_from_args(args)
    except ValueError as e:
        return f"{e}\nUsage: /add [--priority low|medium|high] [--due YYYY-MM-DD] <title>"
    state.task_list.add(task)
    logger.info("Task added id=%s priority=%s", task.id, task.priority.value)
    return f"Added: {task.title} ({task.priority.value})"


def cmd_toggle(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /toggle <n>"
    view = state.visible_tasks()
    try:
        (offset,) = parse_positions(args, len(view))
    except ValueError as e:
        return str(e)
    task = view[offset]
    state.task_list.toggle(task.id)
    return f"{'Completed' if task.is_completed else 'Reopened'}: {task.title}"


def cmd_delete(state: AppState, args: list[str]) -> str:
    """Positions refer to the list currently shown (search applied)."""
    if not args:
        return "Usage: /delete <n> [n...]"
    try:
        offsets = parse_positions(args, len(state.visible_tasks()))
    except ValueError as e:
        return str(e)
    removed = state.task_list.delete_at(offsets, state.search_text)
    logger.info("Deleted %d task(s)", removed)
    return f"Deleted {removed} task(s)."


def cmd_move(state: AppState, args: list[str]) -> str:
    """
    /move 2 5      -> move task 2 in front of task 5
    /move 1 3 7    -> move tasks 1 and 3 (as a block) in front of task 7
    Destination n+1 appends at the end.
    """
    if state.search_text:
        return "Reordering works on the full list only. Clear the search first (/search)."
    if len(args) < 2:
        return "Usage: /move <n> [n...] <dest>"
    size = len(state.task_list)
    try:
        offsets = parse_positions(args[:-1], size)
        (destination,) = parse_positions(args[-1:], size + 1)
    except ValueError as e:
        return str(e)
    state.task_list.move(offsets, destination)
    return render_tasks(state)


def cmd_stats(state: AppState, args: list[str]) -> str:
    return state.task_list.stats().summary()


def cmd_export(state: AppState, args: list[str]) -> str:
    return dumps_tasks(state.task_list, indent=2)


def cmd_secret(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /secret get <key>
    /secret set <key> <value>
    /secret del <key>
    """
    usage = "Usage: /secret get <key> | /secret set <key> <value> | /secret del <key>"
    if len(args) < 2:
        return usage

    sub, key = args[0].lower(), args[1]
    store = state.secret_store
    try:
        if sub == "get" and len(args) == 2:
            value = store.get(key)
            return f"{key} is not set." if value is None else f"{key} = {value}"
        if sub == "set" and len(args) >= 3:
            store.set(key, " ".join(args[2:]))
            return f"Saved {key}."
        if sub in ("del", "delete", "rm") and len(args) == 2:
            store.delete(key)
            return f"Deleted {key}."
    except SecretStoreError as e:
        logger.warning("Secret store failure op=%s key=%s: %s", sub, key, e)
        if emit is not None:
            emit(f"[SECRETS] {e}")
        return "Secret store error."
    return usage


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show build/config status.")
registry.register("list", cmd_list, help_text="Show tasks (search applied).", aliases=["ls"])
registry.register(
    "search", cmd_search, help_text="Filter by title: /search <text> (empty clears).", raw=True
)
registry.register(
    "add", cmd_add, help_text="Add a task: /add [--priority P] [--due YYYY-MM-DD] <title>."
)
registry.register("toggle", cmd_toggle, help_text="Toggle completion: /toggle <n>.", aliases=["t"])
registry.register("delete", cmd_delete, help_text="Delete tasks: /delete <n> [n...].", aliases=["rm"])
registry.register("move", cmd_move, help_text="Reorder: /move <n> [n...] <dest>.", aliases=["mv"])
registry.register("stats", cmd_stats, help_text="Show completion statistics.")
registry.register("export", cmd_export, help_text="Print all tasks as JSON.")
registry.register("secret", cmd_secret, help_text="Secrets: /secret get|set|del <key> [value].")
