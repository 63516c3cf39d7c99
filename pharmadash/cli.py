"""
Interactive console client for the PharmaDash gateway.
Log in against the upstream API, then invoke proxy actions by name.
"""

import getpass
import json

from pharmadash.actions.registry import ACTIONS, NOT_JSON, missing_fields
from pharmadash.models import ActionContext
from pharmadash.session import authenticate
from pharmadash.upstream import UpstreamClient


def run_line(ctx: ActionContext, line: str):
    """Execute ``<action> [json-kwargs]`` and return the printable envelope."""
    name, _, raw_args = line.partition(" ")
    fn = ACTIONS.get(name)
    if fn is None or name in NOT_JSON:
        raise ValueError(f"Unknown action '{name}'. Type 'list' to see them.")

    kwargs = json.loads(raw_args) if raw_args.strip() else {}
    if not isinstance(kwargs, dict):
        raise ValueError("Arguments must be a JSON object")
    missing = missing_fields(name, kwargs)
    if missing:
        raise ValueError(f"Missing required fields: {', '.join(missing)}")
    return fn(ctx, **kwargs).to_dict()


def main():
    print("=== PharmaDash: admin console ===\n")

    client = UpstreamClient()

    # ── Login ────────────────────────────────────────────────────────
    try:
        mobile_no = input("Mobile number (or 'quit'): ").strip()
        if not mobile_no or mobile_no.lower() in {"quit", "exit"}:
            print("Goodbye.")
            return
        password = getpass.getpass("Password: ")
    except (EOFError, KeyboardInterrupt):
        print("\nExiting.")
        return

    session = authenticate(client, mobile_no, password)
    if session is None:
        print("\n[ERROR] Login failed. Invalid credentials.")
        return

    print(f"\n[auth] Logged in as: {session.display_name} (role={session.role})")
    ctx = ActionContext(session=session, client=client)

    # ── REPL ─────────────────────────────────────────────────────────
    while True:
        try:
            line = input("\naction> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nExiting.")
            break

        if not line:
            continue
        if line.lower() in {"quit", "exit"}:
            print("Goodbye.")
            break
        if line.lower() == "list":
            print("\n".join(sorted(n for n in ACTIONS if n not in NOT_JSON)))
            continue

        try:
            envelope = run_line(ctx, line)
        except (TypeError, ValueError) as e:
            print("\n[ERROR] Could not run that action.")
            print("Details:", e)
            continue

        print(json.dumps(envelope, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
