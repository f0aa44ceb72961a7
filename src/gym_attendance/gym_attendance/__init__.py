"""Gym attendance package.

Feature modules (residents, trainers, attendance, reports) each carry a
model, a repository interface with MySQL and in-memory implementations, a
service layer and a thin Flask controller.
"""
