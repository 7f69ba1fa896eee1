"""Utility helpers package"""
