"""
Diff Generator Service - Line and character level diffs for in-line highlighting
"""

from __future__ import annotations

from difflib import SequenceMatcher

from models.diff import CharChange, CharChangeType, CharLevelDiffResult


def _normalize_whitespace(line: str) -> str:
    return " ".join(line.split())


def _common_prefix(a: str, b: str) -> int:
    size = min(len(a), len(b))
    index = 0
    while index < size and a[index] == b[index]:
        index += 1
    return index


def _myers_edits(a: str, b: str) -> list[str]:
    """Shortest edit script between a and b (Myers O(ND)).

    Returns one tag per step, "=" for a kept character, "-" for a character
    removed from a and "+" for a character added from b.
    """
    n, m = len(a), len(b)
    frontier = {1: 0}
    trace = []

    for d in range(n + m + 1):
        trace.append(dict(frontier))
        for k in range(-d, d + 1, 2):
            if k == -d or (k != d and frontier[k - 1] < frontier[k + 1]):
                x = frontier[k + 1]
            else:
                x = frontier[k - 1] + 1
            y = x - k
            while x < n and y < m and a[x] == b[y]:
                x += 1
                y += 1
            frontier[k] = x
            if x >= n and y >= m:
                return _backtrack(trace, n, m)

    return []


def _backtrack(trace: list[dict[int, int]], n: int, m: int) -> list[str]:
    edits = []
    x, y = n, m
    for d in range(len(trace) - 1, -1, -1):
        frontier = trace[d]
        k = x - y
        if k == -d or (k != d and frontier[k - 1] < frontier[k + 1]):
            prev_k = k + 1
        else:
            prev_k = k - 1
        prev_x = frontier[prev_k]
        prev_y = prev_x - prev_k

        while x > prev_x and y > prev_y:
            edits.append("=")
            x -= 1
            y -= 1
        if d > 0:
            edits.append("+" if x == prev_x else "-")
        x, y = prev_x, prev_y

    edits.reverse()
    return edits


class DiffGenerator:
    """Generate character-level diffs between raw texts"""

    def char_diff(self, original: str, modified: str) -> list[CharChange]:
        """Minimal edit script between two strings as equal/remove/add runs.

        Works on code points; start_index is the offset into the original
        consumed so far, -1 for additions. Removed and added characters
        between two equal runs are reported as one remove run then one add run.
        """
        prefix = _common_prefix(original, modified)
        suffix = _common_prefix(original[prefix:][::-1], modified[prefix:][::-1])
        middle_original = original[prefix:len(original) - suffix]
        middle_modified = modified[prefix:len(modified) - suffix]

        edits = ["="] * prefix + _myers_edits(middle_original, middle_modified) + ["="] * suffix

        changes: list[CharChange] = []
        consumed = 0
        i = j = 0
        equal_run = removed = added = ""

        def flush_edits():
            nonlocal consumed, removed, added
            if removed:
                changes.append(self._change(CharChangeType.REMOVE, removed, consumed))
                consumed += len(removed)
            if added:
                changes.append(self._change(CharChangeType.ADD, added, -1))
            removed = added = ""

        for tag in edits:
            if tag == "=":
                if removed or added:
                    flush_edits()
                equal_run += original[i]
                i += 1
                j += 1
                continue

            if equal_run:
                changes.append(self._change(CharChangeType.EQUAL, equal_run, consumed))
                consumed += len(equal_run)
                equal_run = ""
            if tag == "-":
                removed += original[i]
                i += 1
            else:
                added += modified[j]
                j += 1

        if equal_run:
            changes.append(self._change(CharChangeType.EQUAL, equal_run, consumed))
        flush_edits()
        return changes

    def multi_line_char_diff(
        self,
        original: str,
        modified: str,
        ignore_whitespace: bool = False,
    ) -> list[CharLevelDiffResult]:
        """Align lines first, then align characters within changed line pairs only"""
        original_lines = original.split("\n")
        modified_lines = modified.split("\n")

        if ignore_whitespace:
            matcher = SequenceMatcher(
                None,
                [_normalize_whitespace(line) for line in original_lines],
                [_normalize_whitespace(line) for line in modified_lines],
                autojunk=False,
            )
        else:
            matcher = SequenceMatcher(None, original_lines, modified_lines, autojunk=False)

        results: list[CharLevelDiffResult] = []

        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == "equal":
                for offset in range(i2 - i1):
                    results.append(
                        self._paired_line(
                            i1 + offset,
                            original_lines[i1 + offset],
                            modified_lines[j1 + offset],
                            ignore_whitespace,
                        )
                    )
                continue

            paired = min(i2 - i1, j2 - j1) if tag == "replace" else 0
            for offset in range(paired):
                results.append(
                    self._paired_line(
                        i1 + offset,
                        original_lines[i1 + offset],
                        modified_lines[j1 + offset],
                        ignore_whitespace,
                    )
                )

            for index in range(i1 + paired, i2):
                line = original_lines[index]
                results.append(
                    CharLevelDiffResult(
                        line_index=index,
                        original_line=line,
                        modified_line="",
                        char_changes=[self._change(CharChangeType.REMOVE, line, 0)],
                        has_changes=True,
                    )
                )

            for index in range(j1 + paired, j2):
                line = modified_lines[index]
                results.append(
                    CharLevelDiffResult(
                        line_index=index,
                        original_line="",
                        modified_line=line,
                        char_changes=[self._change(CharChangeType.ADD, line, -1)],
                        has_changes=True,
                    )
                )

        return results

    def _paired_line(
        self,
        line_index: int,
        original_line: str,
        modified_line: str,
        ignore_whitespace: bool,
    ) -> CharLevelDiffResult:
        if original_line == modified_line or (
            ignore_whitespace
            and _normalize_whitespace(original_line) == _normalize_whitespace(modified_line)
        ):
            result = self._unchanged_line(line_index, original_line)
            result.modified_line = modified_line
            return result

        char_changes = self.char_diff(original_line, modified_line)
        return CharLevelDiffResult(
            line_index=line_index,
            original_line=original_line,
            modified_line=modified_line,
            char_changes=char_changes,
            has_changes=any(c.type != CharChangeType.EQUAL for c in char_changes),
        )

    def _unchanged_line(self, line_index: int, line: str) -> CharLevelDiffResult:
        return CharLevelDiffResult(
            line_index=line_index,
            original_line=line,
            modified_line=line,
            char_changes=[self._change(CharChangeType.EQUAL, line, 0)],
            has_changes=False,
        )

    @staticmethod
    def _change(change_type: CharChangeType, value: str, start_index: int) -> CharChange:
        return CharChange(
            type=change_type,
            value=value,
            start_index=start_index,
            length=len(value),
        )
