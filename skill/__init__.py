"""
voice skill layer: handlers, dispatch and spoken text
"""
