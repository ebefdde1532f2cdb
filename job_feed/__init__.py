"""Job feed package.

The package keeps a job list in sync with a remote jobs endpoint:
- `models.py` defines the canonical record and the diagnostics entry.
- `sources/` contains the remote endpoint and the bundled seed dataset.
- `normalize.py` turns partial payloads into complete records.
- `controller.py` runs one acquisition cycle; `scheduler.py` repeats it.
- `store.py` holds the snapshot, bookmarks and selection the UI reads.
- `session.py` wires everything together.
"""

from .config import FeedSettings
from .controller import AcquisitionController
from .diagnostics import DiagnosticsLog
from .errors import FeedError, NetworkFailure, ShapeFailure, StatusFailure
from .models import CycleResult, DiagnosticEntry, JobRecord
from .normalize import normalize_job, normalize_jobs
from .scheduler import PollingScheduler
from .session import FeedSession
from .store import FeedStore

__all__ = [
    "AcquisitionController",
    "CycleResult",
    "DiagnosticEntry",
    "DiagnosticsLog",
    "FeedError",
    "FeedSession",
    "FeedSettings",
    "FeedStore",
    "JobRecord",
    "NetworkFailure",
    "PollingScheduler",
    "ShapeFailure",
    "StatusFailure",
    "normalize_job",
    "normalize_jobs",
]
