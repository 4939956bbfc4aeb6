"""
Rain CLI - Command-line interface.

This layer provides the user-facing CLI commands, using the SDK layer
for all operations. It handles:
- Argument parsing
- TTY detection for human vs machine output
- Pretty formatting for human output
- JSON output for piping/automation
"""

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from rain_sdk import __version__
from rain_sdk.core.errors import RainError, ValidationError
from rain_sdk.core.types import CardStatus, Transaction
from rain_sdk.sdk import RainClient

# =============================================================================
# Output Helpers
# =============================================================================


HUMAN_LIMIT = 20  # Default limit for human-readable output


def is_tty() -> bool:
    """Check if stdout is a TTY (human) or pipe (machine)."""
    return sys.stdout.isatty()


def json_output(data: Any, pretty: bool = False) -> None:
    """Print JSON output."""
    indent = 2 if pretty or is_tty() else None
    print(json.dumps(data, indent=indent, default=str))


def error_output(error: RainError) -> None:
    """Print error and exit."""
    json_output(error.to_dict())
    sys.exit(1)


def success_output(data: Any) -> None:
    """Print success output."""
    json_output(data)


def table_output(
    headers: list[str],
    rows: list[list[str]],
    widths: list[int],
) -> None:
    """Print a formatted table for human output."""
    header_line = "  ".join(h.ljust(w) for h, w in zip(headers, widths))
    print(header_line)
    print("-" * len(header_line))

    for row in rows:
        print("  ".join(str(v)[:w].ljust(w) for v, w in zip(row, widths)))


def to_json(obj: Any) -> dict[str, Any]:
    """Model -> JSON-ready dict. Transactions keep their type tag."""
    data = asdict(obj)
    if isinstance(obj, Transaction):
        data = {"type": obj.type.value, **data}
    return data


def list_output(items: list[Any]) -> None:
    success_output({"data": [to_json(i) for i in items], "count": len(items)})


def _page(args: argparse.Namespace) -> dict[str, Any]:
    """Pagination filters; a TTY gets HUMAN_LIMIT rows unless --limit is set."""
    limit = args.limit
    if limit is None and is_tty():
        limit = HUMAN_LIMIT
    return {"cursor": args.cursor, "limit": limit}


# =============================================================================
# CLI Commands
# =============================================================================


def cmd_users_list(client: RainClient, args: argparse.Namespace) -> None:
    """List users."""
    try:
        users = client.users.list(company_id=args.company, **_page(args))
        if is_tty():
            if not users:
                print("No users found.")
                return
            table_output(
                ["ID", "Name", "Email", "Active", "Status"],
                [
                    [
                        u.id,
                        u.full_name,
                        u.email,
                        "yes" if u.is_active else "no",
                        u.application_status.value if u.application_status else "",
                    ]
                    for u in users
                ],
                [36, 30, 32, 6, 10],
            )
        else:
            list_output(users)
    except RainError as e:
        error_output(e)


def cmd_users_get(client: RainClient, args: argparse.Namespace) -> None:
    """Get a user by ID."""
    try:
        success_output(to_json(client.users.get(args.user_id)))
    except RainError as e:
        error_output(e)


def cmd_companies_list(client: RainClient, args: argparse.Namespace) -> None:
    """List companies."""
    try:
        companies = client.companies.list(**_page(args))
        if is_tty():
            if not companies:
                print("No companies found.")
                return
            table_output(
                ["ID", "Name", "Country", "Status"],
                [
                    [
                        c.id,
                        c.name,
                        c.address.country_code,
                        c.application_status.value if c.application_status else "",
                    ]
                    for c in companies
                ],
                [36, 40, 8, 10],
            )
        else:
            list_output(companies)
    except RainError as e:
        error_output(e)


def cmd_companies_get(client: RainClient, args: argparse.Namespace) -> None:
    """Get a company by ID."""
    try:
        success_output(to_json(client.companies.get(args.company_id)))
    except RainError as e:
        error_output(e)


def cmd_cards_list(client: RainClient, args: argparse.Namespace) -> None:
    """List cards."""
    try:
        cards = client.cards.list(
            company_id=args.company,
            user_id=args.user,
            status=CardStatus(args.status) if args.status else None,
            **_page(args),
        )
        if is_tty():
            if not cards:
                print("No cards found.")
                return
            table_output(
                ["ID", "User", "Type", "Status", "Last4", "Expires"],
                [
                    [c.id, c.user_id, c.type.value, c.status.value, c.last4, f"{c.expiration_month}/{c.expiration_year}"]
                    for c in cards
                ],
                [36, 36, 8, 12, 5, 7],
            )
        else:
            list_output(cards)
    except RainError as e:
        error_output(e)


def cmd_cards_get(client: RainClient, args: argparse.Namespace) -> None:
    """Get a card by ID."""
    try:
        success_output(to_json(client.cards.get(args.card_id)))
    except RainError as e:
        error_output(e)


def cmd_transactions_list(client: RainClient, args: argparse.Namespace) -> None:
    """List transactions."""
    try:
        transactions = client.transactions.list(
            company_id=args.company,
            user_id=args.user,
            card_id=args.card,
            transaction_type=args.type or None,
            **_page(args),
        )
        if is_tty():
            if not transactions:
                print("No transactions found.")
                return
            table_output(
                ["ID", "Type", "Amount", "Status", "Description"],
                [
                    [
                        t.id,
                        t.type.value,
                        str(t.amount),
                        getattr(getattr(t, "status", None), "value", ""),
                        getattr(t, "merchant_name", None) or getattr(t, "description", None) or "",
                    ]
                    for t in transactions
                ],
                [36, 10, 12, 10, 30],
            )
        else:
            list_output(transactions)
    except RainError as e:
        error_output(e)


def cmd_transactions_get(client: RainClient, args: argparse.Namespace) -> None:
    """Get a transaction by ID."""
    try:
        success_output(to_json(client.transactions.get(args.transaction_id)))
    except RainError as e:
        error_output(e)


def cmd_transactions_receipt(client: RainClient, args: argparse.Namespace) -> None:
    """Download a transaction receipt."""
    try:
        content = client.transactions.get_receipt(args.transaction_id)
        write_bytes(content, args.output)
    except RainError as e:
        error_output(e)


def cmd_disputes_list(client: RainClient, args: argparse.Namespace) -> None:
    """List disputes."""
    try:
        disputes = client.disputes.list(
            company_id=args.company,
            user_id=args.user,
            transaction_id=args.transaction,
            **_page(args),
        )
        if is_tty():
            if not disputes:
                print("No disputes found.")
                return
            table_output(
                ["ID", "Transaction", "Status", "Created"],
                [[d.id, d.transaction_id, d.status.value, d.created_at] for d in disputes],
                [36, 36, 10, 25],
            )
        else:
            list_output(disputes)
    except RainError as e:
        error_output(e)


def cmd_disputes_get(client: RainClient, args: argparse.Namespace) -> None:
    """Get a dispute by ID."""
    try:
        success_output(to_json(client.disputes.get(args.dispute_id)))
    except RainError as e:
        error_output(e)


def cmd_balances(client: RainClient, args: argparse.Namespace) -> None:
    """Show balances for the tenant, a company or a user."""
    try:
        if args.company:
            balance = client.balances.get_company(args.company)
        elif args.user:
            balance = client.balances.get_user(args.user)
        else:
            balance = client.balances.get()

        if is_tty():
            for label, cents in [
                ("Credit limit", balance.credit_limit),
                ("Pending charges", balance.pending_charges),
                ("Posted charges", balance.posted_charges),
                ("Balance due", balance.balance_due),
                ("Spending power", balance.spending_power),
            ]:
                print(f"{label:<16} {cents / 100:>14,.2f}")
        else:
            success_output(to_json(balance))
    except RainError as e:
        error_output(e)


def cmd_contracts_list(client: RainClient, args: argparse.Namespace) -> None:
    """List collateral contracts."""
    try:
        if args.company:
            contracts = client.contracts.list_company(args.company)
        elif args.user:
            contracts = client.contracts.list_user(args.user)
        else:
            contracts = client.contracts.list()

        if is_tty():
            if not contracts:
                print("No contracts found.")
                return
            table_output(
                ["ID", "Chain", "Deposit address", "Tokens"],
                [[c.id, str(c.chain_id), c.deposit_address, str(len(c.tokens))] for c in contracts],
                [36, 8, 44, 6],
            )
        else:
            list_output(contracts)
    except RainError as e:
        error_output(e)


def cmd_webhooks_list(client: RainClient, args: argparse.Namespace) -> None:
    """List webhook deliveries."""
    try:
        webhooks = client.webhooks.list(
            resource_id=args.resource_id,
            resource_type=args.resource_type,
            resource_action=args.resource_action,
            **_page(args),
        )
        if is_tty():
            if not webhooks:
                print("No webhooks found.")
                return
            table_output(
                ["ID", "Sent", "Received"],
                [[w.id, w.request_sent_at, w.response_received_at or "-"] for w in webhooks],
                [36, 25, 25],
            )
        else:
            list_output(webhooks)
    except RainError as e:
        error_output(e)


def cmd_webhooks_get(client: RainClient, args: argparse.Namespace) -> None:
    """Get a webhook delivery by ID."""
    try:
        success_output(to_json(client.webhooks.get(args.webhook_id)))
    except RainError as e:
        error_output(e)


def cmd_shipping_groups_list(client: RainClient, args: argparse.Namespace) -> None:
    """List bulk shipping groups."""
    try:
        groups = client.shipping_groups.list(**_page(args))
        if is_tty():
            if not groups:
                print("No shipping groups found.")
                return
            table_output(
                ["ID", "Recipient", "City", "Country"],
                [
                    [
                        g.id,
                        f"{g.recipient_first_name} {g.recipient_last_name or ''}".strip(),
                        g.address.city,
                        g.address.country_code,
                    ]
                    for g in groups
                ],
                [36, 30, 20, 8],
            )
        else:
            list_output(groups)
    except RainError as e:
        error_output(e)


def cmd_shipping_groups_get(client: RainClient, args: argparse.Namespace) -> None:
    """Get a shipping group by ID."""
    try:
        success_output(to_json(client.shipping_groups.get(args.shipping_group_id)))
    except RainError as e:
        error_output(e)


def cmd_subtenants_list(client: RainClient, args: argparse.Namespace) -> None:
    """List subtenants."""
    try:
        subtenants = client.subtenants.list()
        if is_tty():
            if not subtenants:
                print("No subtenants found.")
                return
            table_output(["ID", "Name"], [[s.id, s.name] for s in subtenants], [36, 40])
        else:
            list_output(subtenants)
    except RainError as e:
        error_output(e)


def cmd_subtenants_get(client: RainClient, args: argparse.Namespace) -> None:
    """Get a subtenant by ID."""
    try:
        success_output(to_json(client.subtenants.get(args.subtenant_id)))
    except RainError as e:
        error_output(e)


def cmd_reports_get(client: RainClient, args: argparse.Namespace) -> None:
    """Download a daily report."""
    try:
        content = client.reports.get(args.year, args.month, args.day, format=args.format)
        write_bytes(content, args.output)
    except RainError as e:
        error_output(e)


def write_bytes(content: bytes, output: str | None) -> None:
    """
    Write a binary body to a file, or to stdout when no file is given.

    Raises:
        ValidationError: If the output file cannot be written

    """
    if output:
        try:
            Path(output).write_bytes(content)
        except OSError as e:
            raise ValidationError(f"Cannot write {output}: {e.strerror or e}") from e
        success_output({"output": output, "bytes": len(content)})
    else:
        sys.stdout.buffer.write(content)
        sys.stdout.flush()


# =============================================================================
# Main CLI
# =============================================================================


def _add_page_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--limit", "-l", type=int, help=f"Max results (TTY default {HUMAN_LIMIT})")
    parser.add_argument("--cursor", "-c", help="Pagination cursor from a previous page")


def create_parser() -> argparse.ArgumentParser:  # noqa: PLR0915
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="rain",
        description="Rain CLI - Command-line interface for the Rain card-issuing API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Output Modes:
  TTY (human):  Pretty tables, limited rows
  Pipe:         JSON

Examples:
  rain users list --limit 5
  rain cards list --status active | jq '.data[].id'
  rain balances --company <company_id>
  rain reports get 2024 01 15 --format csv --output report.csv
""",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--env", "-e", choices=["dev", "production"], help="Environment (overrides RAIN_ENVIRONMENT)")
    parser.add_argument("--base-url", help="Base URL (overrides RAIN_BASE_URL)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # ========== Users ==========
    users = subparsers.add_parser("users", help="List and inspect users")
    users.set_defaults(func=lambda _c, _a: users.print_help())
    users_sub = users.add_subparsers(dest="subcommand")

    u_list = users_sub.add_parser("list", help="List users")
    u_list.add_argument("--company", help="Filter by company ID")
    _add_page_args(u_list)
    u_list.set_defaults(func=cmd_users_list)

    u_get = users_sub.add_parser("get", help="Get user details")
    u_get.add_argument("user_id", help="User ID")
    u_get.set_defaults(func=cmd_users_get)

    # ========== Companies ==========
    companies = subparsers.add_parser("companies", help="List and inspect companies")
    companies.set_defaults(func=lambda _c, _a: companies.print_help())
    companies_sub = companies.add_subparsers(dest="subcommand")

    co_list = companies_sub.add_parser("list", help="List companies")
    _add_page_args(co_list)
    co_list.set_defaults(func=cmd_companies_list)

    co_get = companies_sub.add_parser("get", help="Get company details")
    co_get.add_argument("company_id", help="Company ID")
    co_get.set_defaults(func=cmd_companies_get)

    # ========== Cards ==========
    cards = subparsers.add_parser("cards", help="List and inspect cards")
    cards.set_defaults(func=lambda _c, _a: cards.print_help())
    cards_sub = cards.add_subparsers(dest="subcommand")

    ca_list = cards_sub.add_parser("list", help="List cards")
    ca_list.add_argument("--company", help="Filter by company ID")
    ca_list.add_argument("--user", help="Filter by user ID")
    ca_list.add_argument("--status", choices=[s.value for s in CardStatus], help="Filter by status")
    _add_page_args(ca_list)
    ca_list.set_defaults(func=cmd_cards_list)

    ca_get = cards_sub.add_parser("get", help="Get card details")
    ca_get.add_argument("card_id", help="Card ID")
    ca_get.set_defaults(func=cmd_cards_get)

    # ========== Transactions ==========
    transactions = subparsers.add_parser("transactions", help="List and inspect transactions")
    transactions.set_defaults(func=lambda _c, _a: transactions.print_help())
    transactions_sub = transactions.add_subparsers(dest="subcommand")

    t_list = transactions_sub.add_parser("list", help="List transactions")
    t_list.add_argument("--company", help="Filter by company ID")
    t_list.add_argument("--user", help="Filter by user ID")
    t_list.add_argument("--card", help="Filter by card ID")
    t_list.add_argument(
        "--type",
        "-t",
        action="append",
        choices=["spend", "collateral", "payment", "fee"],
        help="Transaction type (repeatable)",
    )
    _add_page_args(t_list)
    t_list.set_defaults(func=cmd_transactions_list)

    t_get = transactions_sub.add_parser("get", help="Get transaction details")
    t_get.add_argument("transaction_id", help="Transaction ID")
    t_get.set_defaults(func=cmd_transactions_get)

    t_receipt = transactions_sub.add_parser("receipt", help="Download a receipt")
    t_receipt.add_argument("transaction_id", help="Transaction ID")
    t_receipt.add_argument("--output", "-o", help="File to write (default: stdout)")
    t_receipt.set_defaults(func=cmd_transactions_receipt)

    # ========== Disputes ==========
    disputes = subparsers.add_parser("disputes", help="List and inspect disputes")
    disputes.set_defaults(func=lambda _c, _a: disputes.print_help())
    disputes_sub = disputes.add_subparsers(dest="subcommand")

    d_list = disputes_sub.add_parser("list", help="List disputes")
    d_list.add_argument("--company", help="Filter by company ID")
    d_list.add_argument("--user", help="Filter by user ID")
    d_list.add_argument("--transaction", help="Filter by transaction ID")
    _add_page_args(d_list)
    d_list.set_defaults(func=cmd_disputes_list)

    d_get = disputes_sub.add_parser("get", help="Get dispute details")
    d_get.add_argument("dispute_id", help="Dispute ID")
    d_get.set_defaults(func=cmd_disputes_get)

    # ========== Balances ==========
    balances = subparsers.add_parser("balances", help="Show balances")
    balances_scope = balances.add_mutually_exclusive_group()
    balances_scope.add_argument("--company", help="Company ID")
    balances_scope.add_argument("--user", help="User ID")
    balances.set_defaults(func=cmd_balances)

    # ========== Contracts ==========
    contracts = subparsers.add_parser("contracts", help="Collateral contracts")
    contracts.set_defaults(func=lambda _c, _a: contracts.print_help())
    contracts_sub = contracts.add_subparsers(dest="subcommand")

    c_list = contracts_sub.add_parser("list", help="List contracts")
    contracts_scope = c_list.add_mutually_exclusive_group()
    contracts_scope.add_argument("--company", help="Company ID")
    contracts_scope.add_argument("--user", help="User ID")
    c_list.set_defaults(func=cmd_contracts_list)

    # ========== Webhooks ==========
    webhooks = subparsers.add_parser("webhooks", help="Webhook delivery log")
    webhooks.set_defaults(func=lambda _c, _a: webhooks.print_help())
    webhooks_sub = webhooks.add_subparsers(dest="subcommand")

    w_list = webhooks_sub.add_parser("list", help="List webhook deliveries")
    w_list.add_argument("--resource-id", help="Filter by resource ID")
    w_list.add_argument("--resource-type", help="Filter by resource type")
    w_list.add_argument("--resource-action", help="Filter by resource action")
    _add_page_args(w_list)
    w_list.set_defaults(func=cmd_webhooks_list)

    w_get = webhooks_sub.add_parser("get", help="Get webhook delivery details")
    w_get.add_argument("webhook_id", help="Webhook ID")
    w_get.set_defaults(func=cmd_webhooks_get)

    # ========== Shipping groups ==========
    shipping = subparsers.add_parser("shipping-groups", help="Bulk shipping groups")
    shipping.set_defaults(func=lambda _c, _a: shipping.print_help())
    shipping_sub = shipping.add_subparsers(dest="subcommand")

    s_list = shipping_sub.add_parser("list", help="List shipping groups")
    _add_page_args(s_list)
    s_list.set_defaults(func=cmd_shipping_groups_list)

    s_get = shipping_sub.add_parser("get", help="Get shipping group details")
    s_get.add_argument("shipping_group_id", help="Shipping group ID")
    s_get.set_defaults(func=cmd_shipping_groups_get)

    # ========== Subtenants ==========
    subtenants = subparsers.add_parser("subtenants", help="Subtenants")
    subtenants.set_defaults(func=lambda _c, _a: subtenants.print_help())
    subtenants_sub = subtenants.add_subparsers(dest="subcommand")

    st_list = subtenants_sub.add_parser("list", help="List subtenants")
    st_list.set_defaults(func=cmd_subtenants_list)

    st_get = subtenants_sub.add_parser("get", help="Get subtenant details")
    st_get.add_argument("subtenant_id", help="Subtenant ID")
    st_get.set_defaults(func=cmd_subtenants_get)

    # ========== Reports ==========
    reports = subparsers.add_parser("reports", help="Daily reports")
    reports.set_defaults(func=lambda _c, _a: reports.print_help())
    reports_sub = reports.add_subparsers(dest="subcommand")

    r_get = reports_sub.add_parser("get", help="Download a daily report")
    r_get.add_argument("year", help="Year (e.g. 2024)")
    r_get.add_argument("month", help="Month (e.g. 01)")
    r_get.add_argument("day", help="Day (e.g. 15)")
    r_get.add_argument("--format", "-f", choices=["csv", "json", "ssrp"], help="Report format")
    r_get.add_argument("--output", "-o", help="File to write (default: stdout)")
    r_get.set_defaults(func=cmd_reports_get)

    return parser


def build_client(args: argparse.Namespace) -> RainClient:
    """Create the client from RAIN_* env vars and global flags."""
    return RainClient(environment=args.env, base_url=args.base_url)


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    load_dotenv()
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(0)

    try:
        client = build_client(args)
    except RainError as e:
        error_output(e)
        return

    # Run command (all subparsers have default funcs that print help)
    with client:
        args.func(client, args)


if __name__ == "__main__":
    main()
