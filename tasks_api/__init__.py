"""Tasks REST API backed by a relational store."""
