"""
Job-application tracking (CRUD over the `applications` table).
"""
