"""Pulumi runs this file; the program itself lives in ``infra.app``."""

from infra.app import main

main()
