"""This module :mod:`folnf.pipeline` runs the complete sequence of normal form
computations on one input string and collects all intermediate results. This
is the interface for presentation layers, which display those results side by
side.

>>> result = pipeline(r'\\forall x (P(x) \\to \\exists y R(x, y))')
>>> result.standardized
All(x1, Or(Not(P(x1)), Ex(y1, R(x1, y1))))
>>> result.prefix
Prefix((All, x1), (Ex, y1))
>>> result.pcnf
All(x1, Ex(y1, Or(Not(P(x1)), R(x1, y1))))
>>> result.skolem_cnf
Or(Not(P(x1)), R(x1, sk_f1(x1)))
>>> result.horn
HornReport(is_horn=True, violating_indices=[])
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import time
from typing import Optional

from .firstorder import (clauses_from_cnf, clauses_to_display, ClauseSet,
                         Formula, horn_report, HornReport, Prefix,
                         prenex_to_display, skolemize, SkolemResult,
                         standardize_apart, to_cnf, to_dnf, to_prenex)
from .support.excepthook import NoTraceException
from .support.logging import DeltaTimeFormatter, Timer
from .syntax import parse

# Create logger
delta_time_formatter = DeltaTimeFormatter(
    f'%(asctime)s - %(name)s - %(levelname)-5s - %(delta)s: %(message)s')

stream_handler = logging.StreamHandler()
stream_handler.setFormatter(delta_time_formatter)

logger = logging.getLogger(__name__)
logger.propagate = False
logger.addHandler(stream_handler)
logger.addFilter(lambda record: record.msg.strip() != '')
logger.setLevel(logging.WARNING)


@dataclass
class Options:
    """This class holds options that can be provided to
    :meth:`.NormalFormPipeline.__call__`.
    """

    log_level: int = logging.NOTSET
    """The `log_level` of the logger used by :class:`.NormalFormPipeline`.
    With the default :data:`logging.NOTSET`, the level of the parent logger
    applies.
    """


@dataclass
class PipelineResult:
    """All stages of one run of :class:`NormalFormPipeline`, in the order in
    which they are computed.
    """

    original: Formula
    """The parsed input.
    """

    no_imp_iff: Formula
    """:attr:`original` without implications and equivalences.
    """

    nnf: Formula
    """The negation normal form of :attr:`no_imp_iff`.
    """

    standardized: Formula
    """:attr:`nnf` with each quantifier binding its own variable.
    """

    prefix: Prefix
    """The quantifier prefix of :attr:`standardized`.
    """

    matrix: Formula
    """The quantifier-free matrix of :attr:`standardized`.
    """

    cnf: Formula
    """The conjunctive normal form of :attr:`matrix`.
    """

    dnf: Formula
    """The disjunctive normal form of :attr:`matrix`.
    """

    skolem: SkolemResult
    """The Skolemization of :attr:`prefix` and :attr:`matrix`.
    """

    skolem_cnf: Formula
    """The conjunctive normal form of the Skolemized matrix.
    """

    clauses: ClauseSet
    """The clauses of :attr:`skolem_cnf`.
    """

    horn: HornReport
    """The Horn classification of :attr:`clauses`.
    """

    @property
    def pcnf(self) -> Formula:
        """The prenex conjunctive normal form.
        """
        return self.cnf.quantify(self.prefix)

    @property
    def pdnf(self) -> Formula:
        """The prenex disjunctive normal form.
        """
        return self.dnf.quantify(self.prefix)

    def as_latex(self) -> dict[str, str]:
        """LaTeX displays of all stages, keyed by stage names.
        """
        return {
            'original': self.original.as_latex(),
            'no_imp_iff': self.no_imp_iff.as_latex(),
            'nnf': self.nnf.as_latex(),
            'standardized': self.standardized.as_latex(),
            'prenex': prenex_to_display(self.prefix, self.matrix),
            'pcnf': prenex_to_display(self.prefix, self.cnf),
            'pdnf': prenex_to_display(self.prefix, self.dnf),
            'skolem': self.skolem.matrix.as_latex(),
            'clauses': clauses_to_display(self.clauses)}


@dataclass
class NormalFormPipeline:
    """A callable class that parses one input string and computes all
    normal forms. Instances are reset at the beginning of each call. Use a
    separate instance per thread, or the function :func:`pipeline`.
    """

    options: Optional[Options] = None
    """The options of the last call.
    """

    result: Optional[PipelineResult] = None
    """The result of the last call, which is also returned by
    :meth:`__call__`.
    """

    time_total: Optional[float] = None
    """The total time spent in :meth:`.__call__` in seconds.
    """

    def __call__(self, text: str, **options) -> PipelineResult:
        """The entry point of the callable class :class:`.NormalFormPipeline`.

        :param text:
          The input formula.

        :param `**options`:
          Keyword arguments with keywords corresponding to attributes of
          :class:`.Options`.

        :returns:
          All stages as a :class:`PipelineResult`.
        """
        timer = Timer()
        delta_time_formatter.set_reference_time(time.time())
        NormalFormPipeline.__init__(self)
        self.options = self.create_options(**options)
        save_level = logger.getEffectiveLevel()
        try:
            logger.setLevel(self.options.log_level)
            logger.info(f'{self.options}')
            self.result = self.run(text)
            logger.info('finished')
        except KeyboardInterrupt:
            logger.info('keyboard interrupt')
            raise NoTraceException('KeyboardInterrupt')
        except RecursionError:
            logger.info('recursion limit exceeded')
            raise NoTraceException('formula nested too deeply')
        finally:
            logger.setLevel(save_level)
        self.time_total = timer.get()
        return self.result

    def create_options(self, **kwargs) -> Options:
        """Create an instance of :class:`.Options` that holds `**kwargs`. The
        `**kwargs` arriving here are the `**options` that have been passed to
        :meth:`__call__`.
        """
        options = Options(**kwargs)
        if not isinstance(options.log_level, int):
            raise ValueError(f'log_level must be an int, not {options.log_level!r}')
        return options

    def run(self, text: str) -> PipelineResult:
        original = parse(text)
        self.log_stage('original', original)
        no_imp_iff = original.eliminate_imp_iff()
        self.log_stage('no_imp_iff', no_imp_iff)
        nnf = no_imp_iff.to_nnf()
        self.log_stage('nnf', nnf)
        standardized = standardize_apart(nnf)
        self.log_stage('standardized', standardized)
        prefix, matrix = to_prenex(standardized)
        logger.debug(f'prefix: {prefix}')
        self.log_stage('matrix', matrix)
        cnf = to_cnf(matrix)
        self.log_stage('cnf', cnf)
        dnf = to_dnf(matrix)
        self.log_stage('dnf', dnf)
        skolem = skolemize(prefix, matrix)
        logger.debug(f'skolem mapping: {skolem.mapping}')
        skolem_cnf = to_cnf(skolem.matrix)
        self.log_stage('skolem_cnf', skolem_cnf)
        clauses = clauses_from_cnf(skolem_cnf)
        logger.debug(f'found {len(clauses)} clauses')
        horn = horn_report(clauses)
        logger.info(f'{horn}')
        return PipelineResult(
            original=original, no_imp_iff=no_imp_iff, nnf=nnf,
            standardized=standardized, prefix=prefix, matrix=matrix, cnf=cnf,
            dnf=dnf, skolem=skolem, skolem_cnf=skolem_cnf, clauses=clauses,
            horn=horn)

    def log_stage(self, name: str, f: Formula) -> None:
        if logger.isEnabledFor(logging.DEBUG):
            num_atoms = sum(1 for _ in f.atoms())
            logger.debug(f'{name}: depth {f.depth()}, {num_atoms} atoms')


def pipeline(text: str, **options) -> PipelineResult:
    """User interface for running :class:`NormalFormPipeline` on `text` with a
    fresh instance.
    """
    return NormalFormPipeline()(text, **options)
