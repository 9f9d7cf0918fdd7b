"""Built-in partitioning scheme registrations."""

from __future__ import annotations

from typing import Optional

from cvengine.registries.splitters import SplitConfig, register_splitter

from cvengine.components.splitters.splitters import (
    HoldOutSplitter,
    KFoldSplitter,
    LeaveOneOutSplitter,
    LeavePOutSplitter,
    RollingSplitter,
    StratifiedKFoldSplitter,
)


@register_splitter("holdout")
def _holdout(cfg: SplitConfig, seed: Optional[int]):
    return HoldOutSplitter(cfg=cfg, seed=seed)


@register_splitter("kfold")
def _kfold(cfg: SplitConfig, seed: Optional[int]):
    return KFoldSplitter(cfg=cfg, seed=seed)


@register_splitter("loo")
def _loo(cfg: SplitConfig, seed: Optional[int]):
    return LeaveOneOutSplitter(cfg=cfg, seed=seed)


@register_splitter("lpo")
def _lpo(cfg: SplitConfig, seed: Optional[int]):
    return LeavePOutSplitter(cfg=cfg, seed=seed)


@register_splitter("stratified_kfold")
def _stratified_kfold(cfg: SplitConfig, seed: Optional[int]):
    return StratifiedKFoldSplitter(cfg=cfg, seed=seed)


@register_splitter("rolling")
def _rolling(cfg: SplitConfig, seed: Optional[int]):
    return RollingSplitter(cfg=cfg, seed=seed)
