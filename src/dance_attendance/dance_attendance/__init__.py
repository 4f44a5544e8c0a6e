"""Dance school attendance package.

Organized by feature modules (groups, students, instructors, attendance,
reports) with a thin Flask controller layer over service/repository layers.
Persistence lives in Google Sheets.
"""
