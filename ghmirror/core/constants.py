"""Module holding constants used across ghmirror."""

USER_REPOS_ENDPOINT = "users/{login}/repos?per_page=100"
AUTHENTICATED_REPOS_ENDPOINT = "user/repos?per_page=100&affiliation=owner"
REMOTE_NAME = "github"  # stable upstream name for `remote update`
HOOK_NAME = "pre-receive"
PUSH_GUARD_SCRIPT = """#!/bin/sh

echo "Pushing to this repository is forbidden."
echo "This is a mirror of a GitHub repository. Push there instead."
exit 1
"""
EXEC_BITS = 0o111  # ugo+x
