"""
Trello board aggregation: fetch, join, filter by recency, summarize.
"""
