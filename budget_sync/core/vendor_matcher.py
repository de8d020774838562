"""
Vendor Matching Engine

Resolves raw bank-feed merchant names to the user's vendors:
1. Stored mapping for the exact raw name (fast path)
2. Fuzzy match of the normalized name against existing vendors
3. New vendor named after the normalized name

Every resolution is stored as a mapping so the next sync takes the fast path.
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .merchant_normalizer import normalize_vendor_name
from .similarity import string_similarity
from .vendor_store import ExistingVendor, StorageError, VendorStore
from ..utils.logging_setup import get_logger

logger = get_logger(__name__)

MATCH_THRESHOLD = 0.7  # 70% similarity = auto-match


@dataclass(frozen=True)
class VendorResolution:
    """Result of resolving one raw merchant name"""
    vendor_id: str  # '' when the vendor could not be created
    vendor_name: str
    is_new: bool


def find_best_vendor_match(
    normalized_name: str,
    existing_vendors: Iterable[ExistingVendor],
) -> Optional[Tuple[ExistingVendor, float]]:
    """
    Find the best matching vendor at or above MATCH_THRESHOLD.

    Ties keep the vendor seen first.

    Returns:
        (vendor, score) or None if nothing is similar enough
    """
    best: Optional[Tuple[ExistingVendor, float]] = None

    for vendor in existing_vendors:
        score = string_similarity(normalized_name, vendor.name)
        if score >= MATCH_THRESHOLD and (best is None or score > best[1]):
            best = (vendor, score)

    return best


def remember_vendor(existing_vendors: List[ExistingVendor], resolution: VendorResolution) -> None:
    """Add a freshly created vendor to the working list (in place)"""
    if resolution.vendor_id and not any(v.id == resolution.vendor_id for v in existing_vendors):
        existing_vendors.append(ExistingVendor(resolution.vendor_id, resolution.vendor_name))


class VendorResolver:
    """
    Runs the mapping -> fuzzy match -> create pipeline against a store.

    Storage failures never escape: a failed mapping read is a cache miss,
    a failed mapping write only loses the cache entry, and a failed vendor
    insert yields a resolution with an empty vendor_id.
    """

    def __init__(self, store: VendorStore):
        self.store = store
        self.stats = {
            'cached': 0,
            'fuzzy': 0,
            'created': 0,
            'degraded': 0,
        }

    def _lookup_mapping(self, owner: str, raw_name: str) -> Optional[str]:
        try:
            return self.store.find_mapping(owner, raw_name)
        except StorageError as e:
            logger.warning("Mapping lookup failed for %r, treating as miss: %s", raw_name, e)
            return None

    def _store_mapping(self, owner: str, raw_name: str, vendor_id: str) -> None:
        try:
            self.store.insert_mapping(owner, raw_name, vendor_id)
        except StorageError as e:
            logger.warning("Could not store mapping %r -> %s: %s", raw_name, vendor_id, e)

    def resolve(self,
                owner: str,
                raw_merchant_name: str,
                existing_vendors: List[ExistingVendor]) -> VendorResolution:
        """
        Resolve one raw merchant name to a vendor.

        Args:
            owner: User scope the vendors and mappings belong to
            raw_merchant_name: Merchant string exactly as the feed sent it
            existing_vendors: Snapshot of the user's vendors

        Returns:
            VendorResolution with vendor id, display name and whether it was created
        """
        # Step 1: Stored mapping (keyed on the verbatim raw name)
        mapped_id = self._lookup_mapping(owner, raw_merchant_name)
        if mapped_id:
            vendor = next((v for v in existing_vendors if v.id == mapped_id), None)
            if vendor is not None:
                self.stats['cached'] += 1
                return VendorResolution(vendor.id, vendor.name, is_new=False)
            logger.debug("Stale mapping for %r (vendor %s is gone)", raw_merchant_name, mapped_id)

        # Step 2: Fuzzy match
        normalized = normalize_vendor_name(raw_merchant_name)
        match = find_best_vendor_match(normalized, existing_vendors)

        if match:
            vendor, score = match
            logger.debug("Matched %r -> %r (%.2f)", raw_merchant_name, vendor.name, score)
            self._store_mapping(owner, raw_merchant_name, vendor.id)
            self.stats['fuzzy'] += 1
            return VendorResolution(vendor.id, vendor.name, is_new=False)

        # Step 3: New vendor
        try:
            new_vendor = self.store.insert_vendor(owner, normalized)
        except StorageError as e:
            logger.error("Failed to create vendor %r: %s", normalized, e)
            self.stats['degraded'] += 1
            return VendorResolution('', normalized, is_new=True)

        self._store_mapping(owner, raw_merchant_name, new_vendor.id)
        self.stats['created'] += 1
        return VendorResolution(new_vendor.id, new_vendor.name, is_new=True)

    def resolve_batch(self,
                      owner: str,
                      raw_names: Iterable[str],
                      existing_vendors: List[ExistingVendor]) -> List[VendorResolution]:
        """
        Resolve raw names in order, one at a time.

        Newly created vendors are appended to existing_vendors (in place)
        so later near-identical names in the same batch match them instead
        of creating duplicates.
        """
        results = []
        for raw_name in raw_names:
            resolution = self.resolve(owner, raw_name, existing_vendors)
            remember_vendor(existing_vendors, resolution)
            results.append(resolution)
        return results

    def print_stats(self):
        """Print resolution statistics"""
        total = sum(self.stats.values())
        if total == 0:
            print("No vendors resolved yet")
            return

        print("\n" + "=" * 80)
        print("🏪 VENDOR MATCHING STATISTICS")
        print("=" * 80)
        print(f"Total names resolved: {total}")
        print(f"  ⚡ Stored mapping: {self.stats['cached']} ({self.stats['cached']/total*100:.1f}%)")
        print(f"  🔍 Fuzzy match: {self.stats['fuzzy']} ({self.stats['fuzzy']/total*100:.1f}%)")
        print(f"  ➕ New vendor: {self.stats['created']} ({self.stats['created']/total*100:.1f}%)")
        if self.stats['degraded']:
            print(f"  ⚠️  No vendor (storage error): {self.stats['degraded']}")
        print("=" * 80)
