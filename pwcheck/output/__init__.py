"""
pwcheck Output Module
=====================

Console display and report generation for evaluation results.
"""
