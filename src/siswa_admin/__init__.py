"""Siswa Admin package.

Student records admin panel organized by feature modules (users, students,
sessions) with a thin Flask controller layer over service/repository layers.
"""
