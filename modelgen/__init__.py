"""Compile declarative data model definitions into TypeScript classes."""
