"""Command line report of AES-128 encryption of one block."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

from classwork.aes.cipher import encrypt_block, encryption_trace, format_state
from classwork.aes.ttable import encrypt_block_ttable

DEFAULT_KEY = bytes([0x2B, 0x7E, 0x15, 0x16, 0x28, 0xAE, 0xD2, 0xA6,
                     0xAB, 0xF7, 0x15, 0x88, 0x09, 0xCF, 0x4F, 0x3C])
DEFAULT_PLAINTEXT = bytes([0x32, 0x43, 0xF6, 0xA8, 0x88, 0x5A, 0x30, 0x8D,
                           0x31, 0x31, 0x98, 0xA2, 0xE0, 0x37, 0x07, 0x34])

_METHODS = {
    "conventional": ("AES-128加密常规实现", encrypt_block),
    "ttable": ("AES-128加密查表实现", encrypt_block_ttable),
}


def format_bytes(data: Iterable[int]) -> str:
    """Render bytes as space-separated two-digit lowercase hex."""
    return " ".join(f"{b:02x}" for b in data)


def render_report(plaintext: Iterable[int], key: Iterable[int], method: str) -> str:
    """Encrypt one block with the named method and describe the result."""
    try:
        title, encrypt = _METHODS[method]
    except KeyError:
        raise ValueError(f"unknown method {method!r}; choose from {sorted(_METHODS)}") from None
    plaintext = bytes(plaintext)
    key = bytes(key)
    ciphertext = encrypt(plaintext, key)
    return "\n".join([
        title,
        f"明文:\t{format_bytes(plaintext)}",
        f"密钥:\t{format_bytes(key)}",
        "-------- 执行AES实现 --------",
        "",
        f"密文:\t{format_bytes(ciphertext)}",
    ])


def _render_trace(plaintext: bytes, key: bytes) -> str:
    parts = [
        f"Round {round_number} {stage}:\n{format_state(state)}"
        for round_number, stage, state in encryption_trace(plaintext, key)
    ]
    return "\n\n".join(parts)


def _block(text: str) -> bytes:
    try:
        data = bytes.fromhex(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a hexadecimal string: {text!r}") from None
    if len(data) != 16:
        raise argparse.ArgumentTypeError(f"expected 16 bytes, got {len(data)}")
    return data


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="classwork-aes",
        description="Encrypt one 16-byte block with AES-128.",
    )
    parser.add_argument("--key", type=_block, default=DEFAULT_KEY,
                        help="key as 32 hex digits")
    parser.add_argument("--plaintext", type=_block, default=DEFAULT_PLAINTEXT,
                        help="plaintext block as 32 hex digits")
    parser.add_argument("--method", choices=["conventional", "ttable", "both"],
                        default="both", help="implementation to run")
    parser.add_argument("--trace", action="store_true",
                        help="print the state after every step of the conventional rounds")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and print the reports."""
    args = _parser().parse_args(argv)
    methods = ["conventional", "ttable"] if args.method == "both" else [args.method]
    reports = [render_report(args.plaintext, args.key, method) for method in methods]
    print("\n\n\n".join(reports))
    if args.trace:
        print()
        print(_render_trace(args.plaintext, args.key))
    return 0


if __name__ == "__main__":
    sys.exit(main())