"""
Resume Ingest

Asynchronous resume parsing service core: format extraction, heuristic
section extraction, confidence scoring and task lifecycle tracking.
"""

__app_name__ = "resume-ingest"
__version__ = "0.1.0"
