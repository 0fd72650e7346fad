"""Download puzzle inputs for the days a project has started, once each."""

from aocinput.errors import AocInputError
from aocinput.pipeline import SyncReport, download_inputs, sync_inputs

__all__ = ["AocInputError", "SyncReport", "download_inputs", "sync_inputs"]
