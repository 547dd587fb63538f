"""Employee Contributions package.

Feature modules (employees, contributions) each carry a model, a repository
protocol with a MySQL implementation, a service and a thin Flask controller.
"""
