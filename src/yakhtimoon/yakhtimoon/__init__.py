"""Yakhtimoon package.

Entry forms (attendance, exams, instructors, recitation) and the navigation
shell of the madrasa management app, organized by feature modules with a thin
Flask controller layer over plain form controllers.
"""
