#!/usr/bin/env python3
"""Testhelper CLI for wanecies interoperability testing.

Exchanges JSON over stdio so the node console scripts (or any other ECIES
peer) can cross-check envelopes against this library.
"""

import json
import sys

from wanecies import (
    EciesError,
    decrypt_hex,
    encrypt_hex,
    generate_keypair,
    keypair_from_private_key,
)


def keygen(private_key: str | None = None) -> None:
    """Output a keypair, generating one if no private key is given."""
    keypair = keypair_from_private_key(private_key) if private_key else generate_keypair()
    output = {
        "privateKey": keypair.private_key_hex,
        "publicKey": keypair.public_key_hex,
        "publicKeyUncompressed": keypair.public_key_uncompressed.hex(),
    }
    print(json.dumps(output))


def encrypt(public_key: str) -> None:
    """Encrypt the hex message read from stdin."""
    message_hex = sys.stdin.read().strip()
    envelope = encrypt_hex(public_key, message_hex)
    print(json.dumps({"envelope": envelope}))


def decrypt(private_key: str) -> None:
    """Decrypt the hex envelope read from stdin."""
    envelope_hex = sys.stdin.read().strip()
    try:
        message = decrypt_hex(private_key, envelope_hex)
    except EciesError as e:
        print(json.dumps({"success": False, "error": f"{type(e).__name__}: {e}"}))
        sys.exit(1)
    print(json.dumps({"success": True, "message": message}))


def main() -> None:
    """Main entry point."""
    if len(sys.argv) < 2:
        print("usage: testhelper.py <command> [args]", file=sys.stderr)
        sys.exit(1)

    command = sys.argv[1]

    if command == "keygen":
        keygen(sys.argv[2] if len(sys.argv) > 2 else None)
    elif command in ("encrypt", "decrypt"):
        if len(sys.argv) < 3:
            key_name = "public-key" if command == "encrypt" else "private-key"
            print(f"usage: testhelper.py {command} <{key_name}>", file=sys.stderr)
            sys.exit(1)
        if command == "encrypt":
            encrypt(sys.argv[2])
        else:
            decrypt(sys.argv[2])
    else:
        print(f"unknown command: {command}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
