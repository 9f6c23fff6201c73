"""Ingestion layer.

Turns decoded status documents into namespaced variable patches.  Only the
state/store layer is allowed to merge those patches.
"""
