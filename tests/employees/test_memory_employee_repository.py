from leave_tracker.employees.memory_employee_repository import InMemoryEmployeeRepository
from leave_tracker.employees.model import Employee


def test_lookup_by_id():
    repo = InMemoryEmployeeRepository()
    repo.add(Employee(employee_id=4, leave_balance=2))
    repo.add(Employee(employee_id=1, leave_balance=8))

    assert repo.get_by_id(1).leave_balance == 8
    assert repo.get_by_id(2) is None
    assert repo.exists(4)
    assert not repo.exists(2)
