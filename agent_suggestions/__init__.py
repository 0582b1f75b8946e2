"""
Agent Suggestions

Career-aligned activity suggestions for the Ivy pointers 2, 3 and 4.
"""
