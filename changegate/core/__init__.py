from changegate.core.detector import ChangeDetector, compile_pattern, count_files, filter_files

__all__ = ["ChangeDetector", "compile_pattern", "count_files", "filter_files"]
