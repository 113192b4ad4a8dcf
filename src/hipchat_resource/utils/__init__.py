# -*- coding: utf-8 -*-
"""Utility modules."""

from hipchat_resource.utils.validation import is_blank, mask_secret

__all__ = ["is_blank", "mask_secret"]
