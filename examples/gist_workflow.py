#!/usr/bin/env python3
"""
gistkit - Complete Gist Workflow Example

This example walks through a gist's lifecycle:
1. Create a secret gist
2. Edit it (change a file, delete another)
3. Star it and check the star
4. Comment on it
5. Clean up

Requires GITHUB_TOKEN with the "gist" scope.
"""

import sys

from gistkit import GistKitClient
from gistkit.exceptions import GistKitError


def main() -> None:
    """Run the complete gist workflow example."""
    print("=== gistkit Example ===\n")

    with GistKitClient.from_env() as client:
        if not client.transport.authenticated:
            print("Set GITHUB_TOKEN to run this example.")
            sys.exit(1)

        # Step 1: Create gist
        print("1. Creating gist...")
        gist = client.gists.create(
            {
                "hello.py": "print('hello')\n",
                "notes.md": "# Notes\n",
            },
            description="gistkit example",
        )
        print(f"   Gist ID: {gist.id}")
        print(f"   URL: {gist.html_url}")
        print(f"   Files: {', '.join(sorted(gist.files))}")

        # Step 2: Edit gist
        print("\n2. Editing gist...")
        gist = client.gists.edit(
            gist.id,
            description="gistkit example (edited)",
            files={"hello.py": "print('hello, world')\n", "notes.md": None},
        )
        print(f"   Description: {gist.description}")
        print(f"   Files: {', '.join(sorted(gist.files))}")

        # Step 3: Star gist
        print("\n3. Starring gist...")
        print(f"   Starred: {client.gists.star(gist.id)}")
        print(f"   Is starred: {client.gists.is_starred(gist.id)}")

        # Step 4: Comment
        print("\n4. Commenting...")
        comment = client.gists.create_comment(gist.id, "Looks good")
        comment = client.gists.update_comment(gist.id, comment.id, "Looks great")
        print(f"   Comment {comment.id}: {comment.body}")
        print(f"   Comments on gist: {len(client.gists.list_comments(gist.id))}")

        # Step 5: Clean up
        print("\n5. Cleaning up...")
        print(f"   Comment deleted: {client.gists.delete_comment(gist.id, comment.id)}")
        print(f"   Unstarred: {client.gists.unstar(gist.id)}")
        print(f"   Gist deleted: {client.gists.delete(gist.id)}")

    print("\n=== Example Complete ===")


if __name__ == "__main__":
    try:
        main()
    except GistKitError as e:
        print(f"\nError: {e}")
        sys.exit(1)
