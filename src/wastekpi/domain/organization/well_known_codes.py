class WellKnownCodes:
    """Sentinel codes with special system meaning."""

    # Site holding the pre-reconciled whole-company waste records
    COMPANY_SITE = "SITE_COMPANY"

    # Synthetic branch representing the whole company
    COMPANY_BRANCH = "DEPT000"
