# siteconfig/signals.py

"""
Configuration change broadcast.

Any write to SystemConfiguration drops the cached StoreSettings record;
every reader refetches the full record on its next access.
"""

import logging

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from siteconfig.models import SystemConfiguration
from siteconfig.store_settings import invalidate_store_settings

logger = logging.getLogger(__name__)


@receiver(post_save, sender=SystemConfiguration)
@receiver(post_delete, sender=SystemConfiguration)
def configuration_changed(sender, instance, **kwargs):
    invalidate_store_settings()
    logger.info("Store configuration updated", extra={"key": instance.key})
