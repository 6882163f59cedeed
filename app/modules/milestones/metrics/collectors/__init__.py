# -*- coding: utf-8 -*-
from .review_collectors import init_review_collectors, inc_transition, record_review_batch

__all__ = ["init_review_collectors", "inc_transition", "record_review_batch"]
