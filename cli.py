# Role: Local developer CLI to drive FlowController without the web UI.
# Useful for checking mirror failover by hand and seeing debug logs in the terminal.

from __future__ import annotations

import backend.config
backend.config.load_env()

from backend.core.flow_controller import FlowController
from backend.models.state import ConverterState
from backend.utils.currency import normalize_code, parse_conversion_command, parse_currency_pair

HELP = "Commands: <amount> [FROM to TO], /currencies [filter], /rates [BASE] [TARGET], /pair FROM TO, /swap, /state, /exit"


def _print_currencies(state: ConverterState, needle: str) -> None:
    needle = needle.strip().lower()
    shown = [c for c in state.currencies if not needle or needle in c.display_name.lower()]
    for currency in shown:
        print(f"  {currency.display_name}")
    print(f"({len(shown)} of {len(state.currencies)})")


def _print_rates(flow: FlowController, state: ConverterState, args: str) -> None:
    # Role: "/rates" lists the whole table for a base; "/rates EUR USD" shows one entry of it.
    parts = [normalize_code(p) for p in args.split()]
    base = parts[0] if parts else state.base_currency
    target = parts[1] if len(parts) > 1 else None

    outcome = flow.rate_client.fetch_rate_table(base)
    if not outcome.ok:
        print(f"Error: {outcome.error}")
        return

    table = outcome.data
    print(f"{table.base_currency} rates ({table.date or 'undated'}, {outcome.source} source)")
    if target:
        rate = table.lookup(target)
        print(f"  1 {table.base_currency} = {rate} {target}" if rate is not None else f"  No rate for {target}")
        return
    for code in sorted(table.rates):
        print(f"  {code.upper()}: {table.rates[code]}")
    print(f"({len(table.rates)} rates)")


def main() -> None:
    # 1) Create FlowController + one ConverterState for this terminal
    # 2) Load the currency catalog (failure is reported, not fatal)
    # 3) Route user input -> FlowController -> print result or error
    print("Currency Converter CLI")
    print(HELP)
    print("-" * 50)

    flow = FlowController()
    state = ConverterState(session_id="cli")

    catalog = flow.load_catalog(state)
    if catalog.ok:
        print(f"Loaded {len(state.currencies)} currencies.")
    else:
        print(f"Warning: {catalog.error}")
    print(f"Pair: {state.base_currency} -> {state.target_currency}")

    while True:
        try:
            user_input = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not user_input:
            continue

        cmd = user_input.lower()

        if cmd in {"/exit", "exit", "quit", "/quit"}:
            print("Bye!")
            return

        if cmd in {"/help", "help"}:
            print(HELP)
            continue

        if cmd.startswith("/currencies"):
            if not state.currencies:
                catalog = flow.load_catalog(state)
                if not catalog.ok:
                    print(catalog.error)
                    continue
            _print_currencies(state, user_input[len("/currencies"):])
            continue

        if cmd.startswith("/rates"):
            _print_rates(flow, state, user_input[len("/rates"):])
            continue

        if cmd == "/swap":
            flow.swap_currencies(state)
            print(f"Pair: {state.base_currency} -> {state.target_currency}")
            continue

        if cmd.startswith("/pair"):
            pair = parse_currency_pair(user_input[len("/pair"):])
            if not pair:
                print("Usage: /pair EUR USD")
                continue
            flow.select_pair(state, *pair)
            print(f"Pair: {state.base_currency} -> {state.target_currency}")
            continue

        if cmd == "/state":
            print(state.model_dump_json(indent=2, exclude={"currencies"}))
            continue

        query = parse_conversion_command(user_input)
        if query is None:
            # Key line: let the orchestrator reject it so the message matches every other surface.
            outcome = flow.submit_conversion(state, user_input)
        else:
            outcome = flow.submit_conversion(state, query.amount, query.from_ccy, query.to_ccy)

        if outcome.ok:
            print(outcome.result.describe())
        else:
            print(f"Error: {outcome.message}")


if __name__ == "__main__":
    main()
