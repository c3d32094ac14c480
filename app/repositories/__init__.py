"""레포지토리 패키지 — 영속 계층.

Repository package — Persistence layer.
Contains the durable slot backends and the record store that owns the
user and feedback collections.
"""
