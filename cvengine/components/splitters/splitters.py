from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Optional

from cvengine.contracts.split_configs import (
    SplitHoldoutModel,
    SplitKFoldModel,
    SplitLeaveOneOutModel,
    SplitLeavePOutModel,
    SplitRollingModel,
    SplitStratifiedKFoldModel,
)
from cvengine.components.splitters.cv_split import (
    generate_grouped_kfolds,
    generate_kfolds,
    generate_stratified_kfolds,
)
from cvengine.components.splitters.exhaustive_split import generate_loo_folds, generate_lpo_folds
from cvengine.components.splitters.temporal_split import generate_rolling_folds
from cvengine.components.splitters.trial_split import split as split_trials
from cvengine.components.splitters.types import Fold
from cvengine.core.dataset import Dataset
from cvengine.errors import InvalidParameterError
from ..interfaces import Splitter


@dataclass
class HoldOutSplitter(Splitter):
    cfg: SplitHoldoutModel
    seed: Optional[int] = None

    def split(self, dataset: Dataset) -> Iterator[Fold]:
        yield from split_trials(
            dataset.n_samples,
            train_frac=self.cfg.train_frac,
            n_repeats=self.cfg.n_repeats,
            random_state=self.seed,
        )


@dataclass
class KFoldSplitter(Splitter):
    cfg: SplitKFoldModel
    seed: Optional[int] = None

    def split(self, dataset: Dataset) -> Iterator[Fold]:
        yield from generate_kfolds(
            dataset.n_samples,
            n_splits=self.cfg.n_splits,
            shuffle=self.cfg.shuffle,
            random_state=self.seed,
        )


@dataclass
class LeaveOneOutSplitter(Splitter):
    cfg: SplitLeaveOneOutModel
    seed: Optional[int] = None  # unused: LOO is deterministic

    def split(self, dataset: Dataset) -> Iterator[Fold]:
        yield from generate_loo_folds(dataset.n_samples)


@dataclass
class LeavePOutSplitter(Splitter):
    cfg: SplitLeavePOutModel
    seed: Optional[int] = None  # unused: LPO is deterministic

    def split(self, dataset: Dataset) -> Iterator[Fold]:
        # not `yield from`: the enumeration cap must trip on the call itself
        return generate_lpo_folds(dataset.n_samples, self.cfg.p, max_folds=self.cfg.max_folds)


@dataclass
class StratifiedKFoldSplitter(Splitter):
    cfg: SplitStratifiedKFoldModel
    seed: Optional[int] = None

    def split(self, dataset: Dataset) -> Iterator[Fold]:
        if dataset.strata is None:
            raise InvalidParameterError("Stratified k-fold requires a stratum label on every record.")

        generate = generate_grouped_kfolds if self.cfg.grouped else generate_stratified_kfolds
        yield from generate(
            dataset.strata,
            n_splits=self.cfg.n_splits,
            shuffle=self.cfg.shuffle,
            random_state=self.seed,
        )


@dataclass
class RollingSplitter(Splitter):
    cfg: SplitRollingModel
    seed: Optional[int] = None  # unused: chronological order is fixed

    def split(self, dataset: Dataset) -> Iterator[Fold]:
        yield from generate_rolling_folds(
            dataset.n_samples,
            n_chunks=self.cfg.n_chunks,
            max_train_chunks=self.cfg.max_train_chunks,
        )
