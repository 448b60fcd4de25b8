"""Adaptadores concretos de los colaboradores externos."""
