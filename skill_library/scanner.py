"""Main scanner orchestrator - scans every active skill library"""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from .fs import LocalFileSystem
from .models import ScanResult, Skill, SkillLibrary
from .scanners import SkillScanner

logger = logging.getLogger(__name__)


class LibraryScanner:
    """Scans configured libraries and aggregates their skills"""

    def __init__(self, fs: Optional[LocalFileSystem] = None):
        self.fs = fs or LocalFileSystem()

    def scan_all(
        self, libraries: Iterable[SkillLibrary], parallel: bool = False
    ) -> ScanResult:
        """
        Scan all active libraries in order.

        Args:
            libraries: Libraries to scan; inactive ones are skipped.
            parallel: If True, scan library roots concurrently. The result
                      is still assembled in library order once all finish.

        Returns:
            A fresh ScanResult. Failed libraries contribute no skills and one
            entry in `errors`; they never stop the remaining libraries.
        """
        active = [lib for lib in libraries if lib.is_active]
        errors: List[str] = []

        if parallel and len(active) > 1:
            per_library = self._scan_parallel(active, errors)
        else:
            per_library = self._scan_sequential(active, errors)

        merged: Dict[str, Skill] = {}
        for skills in per_library:
            for skill in skills:
                merged[str(skill.source_path)] = skill

        return ScanResult(
            skills=list(merged.values()),
            scan_time=datetime.now(),
            errors=errors,
        )

    def _scan_parallel(
        self, libraries: List[SkillLibrary], errors: List[str]
    ) -> List[List[Skill]]:
        """Scan libraries in parallel using ThreadPoolExecutor"""
        with ThreadPoolExecutor(max_workers=len(libraries)) as executor:
            futures = [executor.submit(self._scan_library, lib) for lib in libraries]
            outcomes = [future.result() for future in futures]

        # Record errors in library order, not completion order
        results = []
        for skills, error in outcomes:
            if error:
                errors.append(error)
            results.append(skills)
        return results

    def _scan_sequential(
        self, libraries: List[SkillLibrary], errors: List[str]
    ) -> List[List[Skill]]:
        results = []
        for lib in libraries:
            skills, error = self._scan_library(lib)
            if error:
                errors.append(error)
            results.append(skills)
        return results

    def _scan_library(self, library: SkillLibrary):
        """Scan one library, returning (skills, error message or None)"""
        logger.info("Scanning library '%s' (%s) at %s", library.name, library.format, library.path)
        try:
            scanner = SkillScanner(library.path, library.format, fs=self.fs)
            skills = scanner.scan()
        except Exception as e:
            error_msg = f"Error scanning library '{library.name}': {e}"
            logger.error(error_msg)
            return [], error_msg

        logger.info("Found %d skills in '%s'", len(skills), library.name)
        return skills, None
