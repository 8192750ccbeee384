"""Pulumi entry point for the cache demo infrastructure."""
import logging

import structlog

from cachedemo_infra.__main__ import CacheDemoStack
from cachedemo_infra.config import StackConfig

structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.INFO))
CacheDemoStack(config=StackConfig.load()).run()
