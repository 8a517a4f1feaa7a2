"""
File scanning service for accessortracker.
Handles Java file discovery and per-file accessor classification.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from ..accessor import AccessorClassifier, FieldIndex
from ..exceptions import AccessorTrackerError, CodeAnalysisError
from ..java_adapter import JavaModelBuilder
from ..report import AccessorRecord, FileReport
from .configuration_service import ScanConfig


class FileScanService:
    """Service for scanning Java files and reporting their accessors."""

    def __init__(self, classifier: Optional[AccessorClassifier] = None,
                 builder: Optional[JavaModelBuilder] = None,
                 config: Optional[ScanConfig] = None,
                 logger: Optional[logging.Logger] = None):
        """Initialize the file scan service.

        Args:
            classifier: Accessor classifier (default configuration if omitted)
            builder: Java model builder
            config: Scan configuration
            logger: Optional logger instance
        """
        self.classifier = classifier or AccessorClassifier()
        self.builder = builder or JavaModelBuilder()
        self.config = config or ScanConfig()
        self.logger = logger or logging.getLogger(__name__)

    def find_files(self, path: str, pattern: Optional[str] = None,
                   exclude_dirs: Optional[Iterable[str]] = None) -> List[Path]:
        """Find all files matching the pattern in the given path.

        Args:
            path: Directory or file path to scan
            pattern: File pattern to match (default: from the scan config)
            exclude_dirs: Directory names to skip (default: from the scan config)

        Returns:
            Sorted list of matching files

        Raises:
            AccessorTrackerError: if the path does not exist
        """
        pattern = pattern or self.config.pattern
        excluded = set(exclude_dirs) if exclude_dirs is not None else self.config.exclude_dirs
        path_obj = Path(path)

        if path_obj.is_file():
            return [path_obj] if path_obj.match(pattern) else []

        if not path_obj.is_dir():
            raise AccessorTrackerError(f"Path not found: {path}")

        all_files = []
        for file_path in path_obj.rglob(pattern):
            relative_parts = file_path.relative_to(path_obj).parts[:-1]
            if any(part in excluded for part in relative_parts):
                continue
            if file_path.is_file():
                all_files.append(file_path)

        all_files.sort()
        self.logger.info(f"Found {len(all_files)} {pattern} files in {path}")
        return all_files

    def scan_source(self, code: str, path: str = "<source>") -> FileReport:
        """Classify every method of every class declared in ``code``.

        Raises:
            CodeAnalysisError: if the source is not valid Java
        """
        class_models = self.builder.parse(code, filename=path)
        report = FileReport(path=path, class_count=len(class_models))

        for class_model in class_models:
            fields = FieldIndex.for_class(class_model)
            for method in class_model.methods:
                report.method_count += 1
                kind = self.classifier.classify(class_model, method, fields)
                if kind is not None:
                    report.records.append(AccessorRecord(
                        class_name=class_model.name,
                        method_name=method.name,
                        kind=kind.value,
                        line=method.line,
                    ))

        return report

    def scan_file(self, path) -> FileReport:
        """Scan one file; read and parse failures are reported, not raised."""
        try:
            with open(path, 'r', encoding=self.config.encoding) as f:
                code = f.read()
        except (OSError, UnicodeDecodeError) as e:
            self.logger.warning(f"Failed to read {path}: {e}")
            return FileReport(path=str(path), error=f"Failed to read file: {e}")

        try:
            return self.scan_source(code, path=str(path))
        except CodeAnalysisError as e:
            self.logger.warning(f"Failed to parse {path}: {e}")
            return FileReport(path=str(path), error=str(e))

    def scan_path(self, path: str) -> List[FileReport]:
        """Find and scan all Java files under ``path``."""
        files = self.find_files(path)
        reports = [self.scan_file(file_path) for file_path in files]

        accessors = sum(r.accessor_count for r in reports)
        failed = sum(1 for r in reports if r.error)
        self.logger.info(f"Scanned {len(reports)} files: {accessors} accessors, {failed} failures")
        return reports
