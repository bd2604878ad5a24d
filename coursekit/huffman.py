"""Huffman tree construction, coding and a small interactive front end."""

from __future__ import annotations

import argparse
import struct
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

MAX_SYMBOLS = 256
BITS_PER_LINE = 50


class HuffmanError(Exception):
    """Raised when a tree cannot be built or used for coding."""


@dataclass(eq=False)
class HuffmanNode:
    """A node of a Huffman tree; internal nodes carry no character."""

    frequency: int
    character: str | None = None
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def count_frequencies(text: str) -> list[tuple[str, int]]:
    """Count characters in order of first appearance, keeping at most 256 distinct ones."""
    counts: dict[str, int] = {}
    for ch in text:
        if ch in counts:
            counts[ch] += 1
        elif len(counts) < MAX_SYMBOLS:
            counts[ch] = 1
    return list(counts.items())


def build_tree(pairs: Iterable[tuple[str, int]]) -> HuffmanNode:
    """Build a tree from (character, frequency) pairs.

    The pairs are ordered by frequency; the two front nodes are then merged
    repeatedly, the merged node taking the front place, and the last node of
    the queue is bubbled back while it is lighter than its predecessor.
    """
    ordered = sorted(pairs, key=lambda pair: pair[1])
    if not ordered:
        raise HuffmanError("cannot build a tree from an empty character set")
    queue = [HuffmanNode(frequency, character) for character, frequency in ordered]
    while len(queue) > 1:
        left, right = queue[0], queue[1]
        merged = HuffmanNode(left.frequency + right.frequency, None, left, right)
        queue = [merged, *queue[2:]]
        i = len(queue) - 1
        while i > 0 and queue[i].frequency < queue[i - 1].frequency:
            queue[i], queue[i - 1] = queue[i - 1], queue[i]
            i -= 1
    return queue[0]


def generate_codes(root: HuffmanNode) -> dict[str, str]:
    """Map every leaf character to its path of '0' (left) and '1' (right)."""
    codes: dict[str, str] = {}

    def walk(node: HuffmanNode | None, prefix: str) -> None:
        if node is None:
            return
        if node.is_leaf():
            codes[node.character] = prefix
            return
        walk(node.left, prefix + "0")
        walk(node.right, prefix + "1")

    walk(root, "")
    return codes


def format_bits(text: str, width: int = BITS_PER_LINE) -> str:
    """Keep only the digits of text and break them into lines of width."""
    if width <= 0:
        raise ValueError("width must be positive")
    digits = "".join(ch for ch in text if "0" <= ch <= "9")
    lines = [digits[start:start + width] for start in range(0, len(digits), width)]
    return "".join(line + "\n" for line in lines)


class HuffmanCoder:
    """Holds a Huffman tree and its code table."""

    def __init__(self) -> None:
        self.root: HuffmanNode | None = None
        self._codes: dict[str, str] = {}

    def build(self, pairs: Iterable[tuple[str, int]]) -> HuffmanNode:
        self.root = build_tree(pairs)
        self._codes = generate_codes(self.root)
        return self.root

    def build_from_text(self, text: str) -> HuffmanNode:
        return self.build(count_frequencies(text))

    def codes(self) -> dict[str, str]:
        return dict(self._codes)

    def _require_root(self) -> HuffmanNode:
        if self.root is None:
            raise HuffmanError("no Huffman tree has been built")
        return self.root

    def encode(self, text: str) -> str:
        self._require_root()
        try:
            return "".join(self._codes[ch] for ch in text)
        except KeyError as exc:
            raise HuffmanError(f"character {exc.args[0]!r} has no code") from None

    def decode(self, bits: str) -> str:
        root = self._require_root()
        out: list[str] = []
        node = root
        for bit in bits:
            following = node.left if bit == "0" else node.right
            if following is None:
                raise HuffmanError("bit sequence does not follow the tree")
            node = following
            if node.is_leaf():
                out.append(node.character)
                node = root
        return "".join(out)

    def _render(self, node: HuffmanNode | None, level: int) -> Iterator[str]:
        if node is None:
            return
        indent = "\t" * level
        if node.is_leaf():
            yield f"{indent}字符: '{node.character}', 频率: {node.frequency}"
        else:
            yield f"{indent}生成节点, 频率: {node.frequency}"
        yield from self._render(node.left, level + 1)
        yield from self._render(node.right, level + 1)

    def render_tree(self) -> str:
        """Indented view of the tree, one node per line; empty without a tree."""
        if self.root is None:
            return ""
        lines = ["哈夫曼树:", *self._render(self.root, 0)]
        return "\n".join(lines) + "\n"

    def serialize_tree(self) -> bytes:
        """Leaves in pre-order, each as one character byte and a 32-bit frequency."""
        if self.root is None:
            return b""
        chunks: list[bytes] = []
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.is_leaf():
                try:
                    raw = node.character.encode("latin-1")
                except UnicodeEncodeError:
                    raise HuffmanError(
                        f"character {node.character!r} does not fit in one byte"
                    ) from None
                chunks.append(raw + struct.pack("<i", node.frequency))
            else:
                if node.right is not None:
                    stack.append(node.right)
                if node.left is not None:
                    stack.append(node.left)
        return b"".join(chunks)

    def encode_file(self, source: str | Path, target: str | Path) -> None:
        text = Path(source).read_text(encoding="utf-8")
        encoded = self.encode(text)
        with open(target, "w", encoding="utf-8", newline="") as handle:
            handle.write(encoded)

    def decode_file(self, source: str | Path, target: str | Path) -> None:
        with open(source, encoding="utf-8", newline="") as handle:
            bits = handle.read()
        decoded = self.decode(bits)
        with open(target, "w", encoding="utf-8", newline="") as handle:
            handle.write(decoded)


_MENU = (
    "\n选择功能:\n"
    "I: 初始化\n"
    "E: 编码\n"
    "D: 译码\n"
    "P: 打印编码文件\n"
    "T: 打印哈夫曼树\n"
    "Z: 根据文件统计字符频率并生成哈夫曼树\n"
    "Q: 退出"
)


def _read_char(prompt: str = "") -> str:
    while True:
        line = input(prompt).strip()
        if line:
            return line[0]


def _read_int(prompt: str) -> int:
    return int(input(prompt).strip())


def _initialise(coder: HuffmanCoder) -> None:
    count = _read_int("请输入字符集大小: ")
    print("请输入字符及其频率:")
    pairs = []
    for index in range(1, count + 1):
        character = _read_char(f"字符 {index}: ")
        frequency = _read_int("频率: ")
        pairs.append((character, frequency))
    coder.build(pairs)
    print("哈夫曼树初始化成功！")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Interactive Huffman coder.")
    parser.add_argument("--source", default="ToBeTran.txt", help="text to encode")
    parser.add_argument("--code", default="CodeFile.txt", help="encoded output")
    parser.add_argument("--text", default="TextFile.txt", help="decoded output")
    parser.add_argument("--count", default="count.txt", help="text for frequency counting")
    args = parser.parse_args(argv)

    coder = HuffmanCoder()
    while True:
        print(_MENU)
        try:
            choice = _read_char()
        except EOFError:
            return 0
        try:
            if choice == "I":
                _initialise(coder)
            elif choice == "E":
                try:
                    coder.encode_file(args.source, args.code)
                except OSError:
                    print("无法打开文件")
                print(f"编码完成，保存在 {args.code}")
            elif choice == "D":
                try:
                    coder.decode_file(args.code, args.text)
                except OSError:
                    print("无法打开文件")
                print(f"译码完成，保存在 {args.text}")
            elif choice == "P":
                try:
                    content = Path(args.code).read_text(encoding="utf-8")
                except OSError:
                    print(f"无法打开文件 {args.code}")
                else:
                    print(format_bits(content), end="")
                print("编码文件打印完成。")
            elif choice == "T":
                print(coder.render_tree(), end="")
                print("哈夫曼树打印完成。")
            elif choice == "Z":
                try:
                    text = Path(args.count).read_text(encoding="utf-8")
                except OSError as exc:
                    print(f"打开文件失败: {exc}", file=sys.stderr)
                    return 1
                coder.build_from_text(text)
                print(f"根据 {args.count} 文件生成哈夫曼树成功！")
            elif choice == "Q":
                print("退出程序。")
                return 0
            else:
                print("无效选项，重新输入。")
        except EOFError:
            return 0
        except ValueError:
            print("无效输入。")
        except HuffmanError as exc:
            print(exc)


if __name__ == "__main__":
    sys.exit(main())