"""HR Portal package.

Feature modules (schedules, leave, punches, delays) each carry a domain model,
a repository protocol with its MySQL implementation, a service layer and a thin
Flask controller.
"""
