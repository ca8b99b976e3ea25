"""
Main entry point for the weather suitability system.

Orchestrates the fetch, convert, score and recommend workflow for one
location and domain.
"""

import sys
from typing import Optional

from .core import Config, setup_logger, LoggerContext
from .domains import get_domain_config
from .engine import EngineResult, SuitabilityEngine
from .geography import GeographicModifier
from .models import Location, Recommendation
from .services import ForecastConverter, OpenMeteoClient


class SuitabilityApp:
    """Main application for weather suitability recommendations."""

    def __init__(self, config_file: Optional[str] = None, indoor_temperature: Optional[float] = None):
        """
        Initialize application.

        Args:
            config_file: Path to configuration file
            indoor_temperature: Indoor temperature override (°C) for burning
        """
        # Load configuration
        self.config = Config(config_file)

        # Setup logger
        self.logger = setup_logger(log_file=self.config.log_file, log_level=self.config.log_level)
        self.logger.info("=" * 60)
        self.logger.info("Weather Suitability System")
        self.logger.info("=" * 60)
        self.logger.info(f"Configuration: {self.config}")

        self.indoor_temperature = (
            indoor_temperature if indoor_temperature is not None else self.config.indoor_temperature
        )

        # Initialize components (will be set in initialize_components)
        self.client: Optional[OpenMeteoClient] = None
        self.converter: Optional[ForecastConverter] = None
        self.geography: Optional[GeographicModifier] = None

    def initialize_components(self) -> None:
        """Initialize all application components."""
        self.logger.info("Initializing components...")

        self.client = OpenMeteoClient(
            base_url=self.config.forecast_base_url,
            timeout=self.config.forecast_timeout,
            max_retries=self.config.forecast_max_retries,
            models=self.config.forecast_models,
            logger=self.logger
        )
        self.converter = ForecastConverter(timezone=self.config.timezone, logger=self.logger)

        # Coastal reference data is loaded once and shared by every engine
        self.geography = GeographicModifier(logger=self.logger)

        self.logger.info("All components initialized successfully")

    def build_engine(self, domain: str) -> SuitabilityEngine:
        """
        Build the scoring engine for a domain.

        Args:
            domain: Domain name ('drying' or 'burning')

        Returns:
            SuitabilityEngine
        """
        algorithm = get_domain_config(domain, self.config.get_domain_overrides(domain))
        return SuitabilityEngine(
            algorithm,
            geographic_modifier=self.geography,
            indoor_temperature=self.indoor_temperature,
            strict=self.config.strict_weights,
            logger=self.logger
        )

    def run(self, domain: str, location: Location) -> EngineResult:
        """
        Fetch the forecast for a location and evaluate it.

        Args:
            domain: Domain name
            location: Resolved location

        Returns:
            EngineResult
        """
        try:
            self.initialize_components()

            if not all([self.client, self.converter, self.geography]):
                raise RuntimeError("Components not properly initialized")

            engine = self.build_engine(domain)

            with LoggerContext(self.logger, "forecast fetch", domain=domain, location=location.name):
                payload = self.client.fetch_hourly(
                    location.latitude,
                    location.longitude,
                    hours=self.config.forecast_hours,
                    timezone=location.timezone
                )

            observations = self.converter.convert(payload)
            return engine.evaluate(observations[:self.config.forecast_hours], location)

        except Exception as e:
            self.logger.error(f"Application error: {e}", exc_info=True)
            raise

        finally:
            if self.client:
                self.client.close()


def format_recommendation(recommendation: Recommendation) -> str:
    """
    Render a recommendation as plain text for the console.

    Args:
        recommendation: Recommendation to render

    Returns:
        Multi-line text
    """
    lines = [
        f"{recommendation.domain.capitalize()}: {recommendation.status}",
        f"  When:       {recommendation.timing}",
        f"  Why:        {recommendation.reason}",
        f"  Window:     {recommendation.time_window}",
        f"  Confidence: {recommendation.confidence:.0%}",
    ]
    for window in recommendation.alternative_windows:
        lines.append(f"  Also:       {window.label} (average {window.average_score})")
    for message in recommendation.warning_messages:
        lines.append(f"  Warning:    {message}")
    return "\n".join(lines)


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Weather suitability for laundry drying and woodburner lighting"
    )
    parser.add_argument(
        "--domain",
        choices=["drying", "burning"],
        default="drying",
        help="Scoring domain (default: drying)"
    )
    parser.add_argument("--lat", type=float, required=True, help="Latitude (decimal degrees)")
    parser.add_argument("--lon", type=float, required=True, help="Longitude (decimal degrees)")
    parser.add_argument("--name", type=str, default="", help="Location name (improves coastal lookup)")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--indoor-temp",
        type=float,
        default=None,
        help="Indoor temperature in °C (burning only)"
    )

    args = parser.parse_args()

    # Run application
    try:
        app = SuitabilityApp(config_file=args.config, indoor_temperature=args.indoor_temp)
        location = Location(
            latitude=args.lat,
            longitude=args.lon,
            name=args.name,
            timezone=app.config.timezone
        )
        result = app.run(args.domain, location)
        print(format_recommendation(result.recommendation))
    except Exception as e:
        print(f"Application failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
