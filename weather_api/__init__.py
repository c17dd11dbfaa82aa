"""HTTP facade over OpenWeatherMap: current weather, summary, forecast and air quality."""
