"""Core domain package for nospam.

Core contains the pattern language, evaluation, and filtering decisions
without any HTML or storage-specific code, keeping the business logic portable.
"""
