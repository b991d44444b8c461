"""
Coding-practice log (the `leetcode` table).
"""
