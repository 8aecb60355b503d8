"""Catalogue of specialised neural model blueprints and task-based selection."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar, Union


class ActivationType(enum.Enum):
    LINEAR = "Linear"
    SIGMOID = "Sigmoid"
    SIGMOID_STEPWISE = "SigmoidStepwise"
    SIGMOID_SYMMETRIC = "SigmoidSymmetric"
    SIGMOID_SYMMETRIC_STEPWISE = "SigmoidSymmetricStepwise"
    TANH = "Tanh"
    TANH_STEPWISE = "TanhStepwise"
    THRESHOLD = "Threshold"
    THRESHOLD_SYMMETRIC = "ThresholdSymmetric"
    LINEAR_PIECE = "LinearPiece"
    LINEAR_PIECE_SYMMETRIC = "LinearPieceSymmetric"
    SIN_SYMMETRIC = "SinSymmetric"
    COS_SYMMETRIC = "CosSymmetric"
    SIN = "Sin"
    COS = "Cos"


@dataclass(frozen=True)
class LSTMModel:
    """Long short-term memory network for long temporal sequences."""

    label: ClassVar[str] = "LSTM"
    hidden_size: int
    num_layers: int
    dropout: float


@dataclass(frozen=True)
class TCNModel:
    """Temporal convolutional network for series analysis."""

    label: ClassVar[str] = "TCN"
    num_channels: int
    kernel_size: int
    dropout: float


@dataclass(frozen=True)
class NBEATSModel:
    """Neural basis expansion analysis for forecasting."""

    label: ClassVar[str] = "NBEATS"
    forecast_length: int
    backcast_length: int
    hidden_layer_units: int


@dataclass(frozen=True)
class TransformerModel:
    """Transformer for language and complex patterns."""

    label: ClassVar[str] = "Transformer"
    d_model: int
    num_heads: int
    num_layers: int
    max_seq_length: int


@dataclass(frozen=True)
class CNNModel:
    """Convolutional network for spatial patterns."""

    label: ClassVar[str] = "CNN"
    num_filters: int
    filter_size: int
    pooling_size: int


@dataclass(frozen=True)
class CustomFANNModel:
    """Fully configurable feed-forward network."""

    label: ClassVar[str] = "CustomFANN"
    layers: tuple[int, ...]
    activation: ActivationType
    learning_rate: float


ModelType = Union[LSTMModel, TCNModel, NBEATSModel, TransformerModel, CNNModel, CustomFANNModel]


@dataclass(frozen=True)
class ModelCapabilities:
    can_handle_sequences: bool = False
    can_handle_text: bool = False
    can_handle_images: bool = False
    can_handle_tabular: bool = False
    optimal_for_forecasting: bool = False
    supports_online_learning: bool = False
    memory_efficient: bool = False
    gpu_optimized: bool = False


@dataclass
class ModelSpec:
    model_type: ModelType
    capabilities: ModelCapabilities
    description: str
    use_cases: list[str] = field(default_factory=list)
    performance_score: float = 0.0


def available_models() -> list[ModelSpec]:
    """Return every model in the catalogue, freshly built."""
    return [
        ModelSpec(
            model_type=LSTMModel(hidden_size=128, num_layers=2, dropout=0.2),
            capabilities=ModelCapabilities(
                can_handle_sequences=True,
                can_handle_text=True,
                can_handle_tabular=True,
                optimal_for_forecasting=True,
                gpu_optimized=True,
            ),
            description="LSTM optimizada para análisis de series temporales y secuencias",
            use_cases=[
                "Predicción de ventas",
                "Análisis de sensores IoT",
                "Procesamiento de texto secuencial",
            ],
            performance_score=0.85,
        ),
        ModelSpec(
            model_type=NBEATSModel(forecast_length=24, backcast_length=168, hidden_layer_units=512),
            capabilities=ModelCapabilities(
                can_handle_sequences=True,
                can_handle_tabular=True,
                optimal_for_forecasting=True,
                memory_efficient=True,
                gpu_optimized=True,
            ),
            description="N-BEATS para forecasting de alta precisión sin características externas",
            use_cases=[
                "Predicción de demanda energética",
                "Forecasting financiero",
                "Planificación de inventario",
            ],
            performance_score=0.92,
        ),
        ModelSpec(
            model_type=TransformerModel(d_model=512, num_heads=8, num_layers=6, max_seq_length=2048),
            capabilities=ModelCapabilities(
                can_handle_sequences=True,
                can_handle_text=True,
                gpu_optimized=True,
            ),
            description="Transformer para comprensión de lenguaje y patrones complejos",
            use_cases=[
                "Generación de código",
                "Análisis de documentos",
                "Traducción automática",
            ],
            performance_score=0.88,
        ),
        ModelSpec(
            model_type=CustomFANNModel(
                layers=(10, 15, 10, 1),
                activation=ActivationType.SIGMOID_SYMMETRIC,
                learning_rate=0.01,
            ),
            capabilities=ModelCapabilities(
                can_handle_tabular=True,
                supports_online_learning=True,
                memory_efficient=True,
            ),
            description="Red neuronal FANN completamente personalizable para tareas generales",
            use_cases=[
                "Clasificación general",
                "Regresión simple",
                "Prototipado rápido",
            ],
            performance_score=0.75,
        ),
    ]


def _first_of(kind: type) -> ModelSpec | None:
    return next((m for m in available_models() if isinstance(m.model_type, kind)), None)


def select_best_model_for_task(task_description: str) -> ModelSpec | None:
    """Pick a catalogue model from keywords in a task description."""
    task = task_description.lower()
    if any(word in task for word in ("predicción", "forecasting", "serie")):
        if "alta precisión" in task or "avanzado" in task:
            return _first_of(NBEATSModel)
        return _first_of(LSTMModel)
    if any(word in task for word in ("código", "texto", "lenguaje")):
        return _first_of(TransformerModel)
    return _first_of(CustomFANNModel)