#!/usr/bin/env python3
"""
Hatena Blog Members - Command Line Entry Point

Manage the members of a Hatena Blog.

Usage:
    # List members
    hatenablog-members list

    # Add a member, or change their role
    hatenablog-members add <username> --role editor
    hatenablog-members update <username> --role admin

    # Remove a member
    hatenablog-members delete <username>

Credentials are read from HATENABLOG_USERNAME / HATENABLOG_APIKEY,
either in the environment or in a .env file.
"""

import sys
import logging
import argparse

from dotenv import load_dotenv
from pydantic import ValidationError

from . import __version__
from .exceptions import HatenaBlogError
from .models import Role
from .settings import build_client, get_settings

logger = logging.getLogger("hatenablog-members")

ROLES = [role.value for role in Role]


def run_list(client, args):
    """Print all members of the blog."""
    members = client.list_members()

    print(f"\nMembers of {client.blog_host}:")
    print("=" * 50)
    for member in members:
        print(f"{member.username:<30} {member.role}")
    print()


def run_show(client, args):
    """Print a single member."""
    member = client.get_member(args.username)
    if member is None:
        logger.error(f"Member {args.username} not found")
        sys.exit(1)

    print(f"{member.username:<30} {member.role}")


def run_add(client, args):
    member = client.add_member(args.username, args.role)
    print(f"Added {member.username} as {member.role}")


def run_update(client, args):
    member = client.update_member(args.username, args.role)
    print(f"Updated {member.username} to {member.role}")


def run_delete(client, args):
    client.delete_member(args.username)
    print(f"Deleted {args.username}")


COMMANDS = {
    "list": run_list,
    "show": run_show,
    "add": run_add,
    "update": run_update,
    "delete": run_delete,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Hatena Blog Members - manage the members of a Hatena Blog"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--username", "-u", help="Hatena ID of the operator")
    parser.add_argument("--owner", "-o", help="Hatena ID of the blog owner")
    parser.add_argument("--blog-host", "-b", help="Blog domain, e.g. staff.hatenablog.com")
    parser.add_argument("--hatenablog-host", help="Override the API host")
    parser.add_argument("--insecure", action="store_true", default=None, help="Use plain HTTP")
    parser.add_argument("--log-level", help="Logging level")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    subparsers.add_parser("list", help="List members")

    show_parser = subparsers.add_parser("show", help="Show a single member")
    show_parser.add_argument("username", help="Hatena ID of the member")

    add_parser = subparsers.add_parser("add", help="Add a member")
    add_parser.add_argument("username", help="Hatena ID of the member")
    add_parser.add_argument("--role", "-r", required=True, choices=ROLES)

    update_parser = subparsers.add_parser("update", help="Change a member's role")
    update_parser.add_argument("username", help="Hatena ID of the member")
    update_parser.add_argument("--role", "-r", required=True, choices=ROLES)

    delete_parser = subparsers.add_parser("delete", help="Remove a member")
    delete_parser.add_argument("username", help="Hatena ID of the member")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command not in COMMANDS:
        parser.print_help()
        return

    load_dotenv()

    try:
        settings = get_settings(
            username=args.username,
            owner=args.owner,
            blog_host=args.blog_host,
            hatenablog_host=args.hatenablog_host,
            insecure=args.insecure,
            log_level=args.log_level,
        )
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        with build_client(settings, __version__) as client:
            COMMANDS[args.command](client, args)
    except HatenaBlogError as e:
        logger.error(f"{args.command} failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
