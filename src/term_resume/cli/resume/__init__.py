"""The resume viewer application."""

from term_resume.cli.resume.sections import SECTIONS, TITLES, Section
from term_resume.cli.resume.state import AppState, TabSet
from term_resume.cli.resume.viewer import LoopState, ResumeViewer, run_viewer

__all__ = [
    "SECTIONS",
    "TITLES",
    "Section",
    "AppState",
    "TabSet",
    "LoopState",
    "ResumeViewer",
    "run_viewer",
]
