from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import date
import os
import os.path
from typing import Optional


@dataclass
class NoterConf:
    """Settings for a single run of noter.

    There is no config file; the CLI builds an instance from the current directory and its arguments.
    """

    root: str
    """The folder containing one subfolder per course, e.g. ``CS101 Intro to Algorithms``."""

    today: Optional[date] = None
    """The date used for naming new notes. If None, the local date is looked up when needed."""

    preview_mode: bool = False
    """If True, operations report what they would create but do not change the filesystem.

    Instead of setting this directly, you can pass a ``--preview`` command-line argument to relevant commands.
    """

    @classmethod
    def for_cwd(cls, **kwargs) -> NoterConf:
        return cls(root=os.getcwd(), **kwargs)

    def note_date(self) -> date:
        return self.today or date.today()

    def standardize(self) -> NoterConf:
        return replace(self, root=os.path.realpath(self.root))

    def instantiate(self):
        from noter.api import Noter
        return Noter(self.standardize())
