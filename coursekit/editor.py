"""A line editor working on a bounded window ("active area") of a text file."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from itertools import islice
from typing import Iterable, Iterator, TextIO

ACTIVE_CAPACITY = 100
PAGE_SIZE = 20


class EditorError(Exception):
    """Raised when an editing command refers to lines outside the active area."""


def format_line(number: int, text: str) -> str:
    """Render a line with its number right-aligned in four columns."""
    return f"{number:4d} {text}"


def _strip_newline(line: str) -> str:
    return line.removesuffix("\n")


@dataclass
class ActiveArea:
    """The lines of a file currently held in memory, numbered from first_line_number."""

    capacity: int = ACTIVE_CAPACITY
    first_line_number: int = 1
    lines: list[str] = field(default_factory=list)

    def __init__(self, capacity: int = ACTIVE_CAPACITY, first_line_number: int = 1) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self.first_line_number = first_line_number
        self.lines = []

    @property
    def last_insert_position(self) -> int:
        return self.first_line_number + len(self.lines)

    def fill(self, source: Iterable[str]) -> int:
        """Read lines from source until the area is full; return how many were read."""
        room = self.capacity - len(self.lines)
        read = [_strip_newline(line) for line in islice(source, max(room, 0))]
        self.lines.extend(read)
        return len(read)

    def numbered(self) -> list[tuple[int, str]]:
        """The lines paired with their line numbers."""
        return list(enumerate(self.lines, start=self.first_line_number))

    def pages(self, page_size: int = PAGE_SIZE) -> Iterator[list[str]]:
        """Formatted lines, grouped into pages of page_size."""
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        rendered = [format_line(number, text) for number, text in self.numbered()]
        for start in range(0, len(rendered), page_size):
            yield rendered[start:start + page_size]

    def insert(self, line_number: int, text: str) -> tuple[int, str] | None:
        """Insert text so that it becomes line_number.

        When the area is full its first line is dropped to make room; that
        line is returned with its number so the caller can save it.
        """
        if not self.first_line_number <= line_number <= self.last_insert_position:
            raise EditorError(
                f"插入行号非法！应在[{self.first_line_number}, "
                f"{self.last_insert_position}]之间。"
            )
        evicted = None
        if len(self.lines) >= self.capacity:
            evicted = (self.first_line_number, self.lines.pop(0))
        self.lines.insert(line_number - self.first_line_number, _strip_newline(text))
        return evicted

    def delete(self, start: int, end: int) -> list[str]:
        """Remove lines start..end inclusive and return them."""
        if start < self.first_line_number or end >= self.last_insert_position:
            raise EditorError("删除行号超出范围！")
        if start > end:
            raise EditorError("删除命令格式错误，起始行号应小于结束行号。")
        low = start - self.first_line_number
        high = end - self.first_line_number + 1
        removed = self.lines[low:high]
        del self.lines[low:high]
        return removed

    def replace(self, line_number: int, old: str, new: str) -> bool:
        """Replace the first occurrence of old in the given line; report whether it was found."""
        if not self.first_line_number <= line_number < self.last_insert_position:
            raise EditorError("行号超出范围！")
        index = line_number - self.first_line_number
        line = self.lines[index]
        if old not in line:
            return False
        self.lines[index] = line.replace(old, new, 1)
        return True

    def match(self, pattern: str) -> list[tuple[int, str]]:
        """Numbered lines that contain pattern."""
        return [(number, text) for number, text in self.numbered() if pattern in text]

    def switch(self, source: Iterable[str], sink: TextIO) -> int:
        """Write the area to sink, advance by one window and refill from source.

        Returns how many lines were read; zero means the source is exhausted.
        """
        for number, text in self.numbered():
            sink.write(format_line(number, text) + "\n")
        self.lines = []
        self.first_line_number += self.capacity
        return self.fill(source)


_MENU = (
    "\n请输入命令:\n"
    "i  插入行\n"
    "d  删除行\n"
    "n  切换活区\n"
    "p  显示活区\n"
    "S  串替换\n"
    "m  模式匹配\n"
    "q  退出"
)


def _show(area: ActiveArea) -> None:
    pages = list(area.pages(PAGE_SIZE))
    for index, page in enumerate(pages):
        print("\n".join(page))
        if index < len(pages) - 1:
            choice = input("按任意键翻页显示，或按'q'退出该功能: ")
            if choice[:1] in ("q", "Q"):
                break


def _read_tokens(count: int, prompt: str) -> list[str]:
    tokens: list[str] = []
    first = True
    while len(tokens) < count:
        tokens.extend(input(prompt if first else "").split())
        first = False
    return tokens[:count]


def _read_int(prompt: str) -> int:
    return int(_read_tokens(1, prompt)[0])


def _read_command() -> str:
    while True:
        line = input("请输入命令: ").strip()
        if line:
            return line[0]


def _run(area: ActiveArea, source: TextIO, output: str) -> None:
    while True:
        print(_MENU)
        command = _read_command()
        try:
            if command == "i":
                number = _read_int("请输入插入行号：")
                text = input("请输入要插入的内容：")
                evicted = area.insert(number, text)
                if evicted is not None:
                    with open(output, "a", encoding="utf-8") as sink:
                        sink.write(format_line(*evicted) + "\n")
                _show(area)
            elif command == "d":
                start = _read_int("请输入删除起始行号：")
                end = _read_int("请输入删除结束行号：")
                area.delete(start, end)
                _show(area)
            elif command == "n":
                with open(output, "a", encoding="utf-8") as sink:
                    read = area.switch(source, sink)
                _show(area)
                if read == 0:
                    print("文件已读取完毕，无法继续切换活区。")
            elif command == "p":
                _show(area)
            elif command == "S":
                old, new = _read_tokens(2, "请依次输入要替换目标和替换内容（以回车键相隔）:")
                number = _read_int("请输入行号：")
                if area.replace(number, old, new):
                    print("替换成功。")
                else:
                    print("未找到要替换的内容。")
                _show(area)
            elif command == "m":
                (pattern,) = _read_tokens(1, "请输入查找的目标：")
                print(f'匹配包含 "{pattern}" 的行：')
                found = area.match(pattern)
                for number, text in found:
                    print(f"行 {number}: {text}")
                if not found:
                    print("未找到匹配的内容。")
            elif command == "q":
                return
            else:
                print("无效命令")
        except EditorError as exc:
            print(exc)
        except ValueError:
            print("无效输入。")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Edit a text file one window at a time.")
    parser.add_argument("--input", default="input.txt", help="file to edit")
    parser.add_argument("--output", default="output.txt", help="file receiving saved lines")
    args = parser.parse_args(argv)

    try:
        source = open(args.input, encoding="utf-8")
    except OSError:
        print(f"无法打开文件: {args.input}")
        return 1
    with source:
        area = ActiveArea()
        area.fill(source)
        try:
            _run(area, source, args.output)
        except EOFError:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())