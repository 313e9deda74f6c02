"""Logging configuration for the league manager.

Every interactive session gets its own log file under ``{data_dir}/logs``.
The terminal only shows WARNING+ by default so log lines do not break up
the menus; the file keeps DEBUG+ with logger names.
"""

import logging
from datetime import datetime
from pathlib import Path

LOG_PREFIX = "session-"
KEEP_SESSIONS = 20


def prune_session_logs(log_dir: Path, keep: int = KEEP_SESSIONS) -> list[Path]:
    """Delete all but the *keep* newest session logs in *log_dir*.

    Returns:
        The deleted paths, oldest first.
    """
    # Timestamped names sort chronologically
    logs = sorted(log_dir.glob(f"{LOG_PREFIX}*.log"))
    stale = logs[:-keep] if keep > 0 else logs
    for path in stale:
        path.unlink(missing_ok=True)
    return stale


def setup_logging(
    data_dir: str = "data",
    console_level: int = logging.WARNING,
    keep_sessions: int = KEEP_SESSIONS,
) -> Path:
    """Attach a console handler and a per-session file handler to the root logger.

    Handlers already on the root logger are removed first, so repeated calls
    (one per run, or one per test) never duplicate output.  Older session
    logs beyond ``keep_sessions`` are pruned before the new one is opened.

    Args:
        data_dir: Base data directory. ``logs/`` is created inside it.
        console_level: Minimum level printed to the terminal.
        keep_sessions: Number of previous session logs to retain.

    Returns:
        Path to the new session log file.
    """
    log_dir = Path(data_dir) / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    prune_session_logs(log_dir, keep=keep_sessions)

    timestamp = datetime.now().strftime("%Y-%m-%d-%H%M%S")
    log_file = log_dir / f"{LOG_PREFIX}{timestamp}.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()

    terminal = logging.StreamHandler()
    terminal.setLevel(console_level)
    terminal.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root.addHandler(terminal)

    session = logging.FileHandler(str(log_file), encoding="utf-8")
    session.setLevel(logging.DEBUG)
    session.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)-5s [%(name)s] %(message)s")
    )
    root.addHandler(session)

    return log_file
