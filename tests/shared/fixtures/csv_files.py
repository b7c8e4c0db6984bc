"""CSV data sets written to temporary directories."""

from pathlib import Path

BRANCHES_CSV = """id,code,name,region
B000,DEPT000,Head Office,Kanto
B001,DEPT001,Tokyo Branch,Kanto
"""

SITES_CSV = """id,code,name,branch_id,construction_type,start_date,end_date,construction_amount,status
S000,SITE_COMPANY,Company Total,B000,,,,,active
S001,SITE001,Harbor Tower,B001,office building,2023-04-01,,250,ACTIVE
S002,SITE002,Old Depot,B001,warehouse,2021-01-01,2023-12-31,,completed
"""

RECORDS_CSV = """site_code,year_month,waste_type,total_weight,sorted_weight,mixed_weight,recycled_weight,thermal_recycled_weight,final_disposal_weight
SITE001,2024-04,concrete debris,2000,1800,200,1700,100,100
SITE001,2024-04,wood waste,500,,0,n/a,150,0
SITE_COMPANY,2024-04,concrete debris,"1,500",1400,100,1100,50,350
"""


def write_data_dir(
    path: Path,
    branches: str = BRANCHES_CSV,
    sites: str = SITES_CSV,
    records: str = RECORDS_CSV,
) -> Path:
    (path / "branches.csv").write_text(branches, encoding="utf-8")
    (path / "sites.csv").write_text(sites, encoding="utf-8")
    (path / "waste-records.csv").write_text(records, encoding="utf-8")
    return path
