"""Test suite for mentormatch"""
