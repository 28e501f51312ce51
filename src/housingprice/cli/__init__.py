"""
Command-line interface modules.

Provides CLI entry points for:
- api_server: Start the REST API
- train_model: Train and save the regression model
- predict: Predict a price with the saved model
"""
