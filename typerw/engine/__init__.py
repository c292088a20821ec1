"""Rewrite evaluator."""
