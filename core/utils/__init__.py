"""Shared helper functions"""
