"""Pankti Manager package.

Customer/payment tracking plus employee attendance and advances for a small
service business. Organized by feature modules (customers, employees,
attendance, ...) with a thin Flask controller layer over service/repository
layers. Derived figures live in :mod:`pankti_manager.aggregation`.
"""
