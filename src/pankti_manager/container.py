from __future__ import annotations

from dataclasses import dataclass

from .advances.mysql_advance_repository import MySQLAdvanceRepository
from .advances.service import AdvanceService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .auth.service import AuthService
from .customers.mysql_customer_repository import MySQLCustomerRepository
from .customers.mysql_payment_repository import MySQLPaymentRepository
from .customers.service import CustomerService
from .dashboard.service import DashboardService
from .database.connection import DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.service import EmployeeService


@dataclass(frozen=True)
class Container:
    auth_service: AuthService
    customer_service: CustomerService
    dashboard_service: DashboardService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    advance_service: AdvanceService


def build_services(
    *,
    customers_repo,
    payments_repo,
    employees_repo,
    attendance_repo,
    advances_repo,
    auth_service: AuthService,
) -> Container:
    """Wire services over any repository implementations (MySQL or in-memory)."""

    return Container(
        auth_service=auth_service,
        customer_service=CustomerService(customers_repo, payments_repo),
        dashboard_service=DashboardService(customers_repo, payments_repo),
        employee_service=EmployeeService(employees_repo),
        attendance_service=AttendanceService(attendance_repo, employees_repo),
        advance_service=AdvanceService(advances_repo, employees_repo),
    )


def build_container(*, db_config: dict, auth_service: AuthService) -> Container:
    conn = DatabaseConnection.from_dict(db_config)

    return build_services(
        customers_repo=MySQLCustomerRepository(conn),
        payments_repo=MySQLPaymentRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        advances_repo=MySQLAdvanceRepository(conn),
        auth_service=auth_service,
    )
