from models.center import TestCenter
from models.applicant import Applicant
from models.quota import RegionQuota
from models.allocation import Allocation
from models.stats import RegionStats, DistributionStats
