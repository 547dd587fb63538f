"""Example: drive a running server through the Python client.

Start the API first (python scripts/run_server.py), then run this file.
"""

from src.employee_contributions.employee_contributions.client import ContributionClient, EmployeeClient


def main():
    employees = EmployeeClient()
    contributions = ContributionClient()

    ada = employees.create({"name": "Ada", "department": "Eng", "phone": "555"})
    contributions.create({"amount": 100, "month": "Jan", "employee": ada["_id"]})

    for c in contributions.get_by_employee_id(ada["_id"]):
        print(c["month"], c["amount"], c["employee"]["name"])


if __name__ == "__main__":
    main()
