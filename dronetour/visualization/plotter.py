# dronetour/visualization/plotter.py
"""
Contains the FlightMapVisualizer class for generating an interactive map and
a plot of one flight.
"""
import folium
import plotly.graph_objects as go
from typing import List, Sequence, Tuple

from ..airspace import ObstacleMap, Obstacle, Target
from ..drone import FlightResult
from .constants import OutputConstants
from .flight_log import marker_properties

class FlightMapVisualizer:
    """Draws the obstacle map, the sensors and the flown path."""

    def _ring_locations(self, obstacle: Obstacle) -> List[Tuple[float, float]]:
        return [p.as_lat_lon() for p in obstacle.ring]

    def create_flight_map(self, airspace: ObstacleMap, targets: Sequence[Target], result: FlightResult) -> folium.Map:
        center = result.start.as_lat_lon()
        flight_map = folium.Map(location=list(center), zoom_start=17, tiles="CartoDB positron")

        area_group = folium.FeatureGroup(name="Confinement Area & No-Fly Zones", show=True).add_to(flight_map)
        folium.PolyLine(
            locations=self._ring_locations(airspace.confinement),
            color=OutputConstants.CONFINEMENT_COLOR, weight=2, dash_array='5',
            tooltip=airspace.confinement.name
        ).add_to(area_group)
        for zone in airspace.no_fly_zones:
            color = zone.fill or OutputConstants.NO_FLY_ZONE_COLOR
            folium.Polygon(
                locations=self._ring_locations(zone),
                color=color, fill=True, fill_color=color, fill_opacity=0.4,
                tooltip=zone.name
            ).add_to(area_group)

        sensors_group = folium.FeatureGroup(name="Sensors", show=True).add_to(flight_map)
        for i, target in enumerate(targets):
            visited = result.visited[i] if i < len(result.visited) else False
            reading = result.readings[i] if i < len(result.readings) else float('nan')
            properties = marker_properties(target.location, reading, visited)
            folium.CircleMarker(
                location=list(target.position.as_lat_lon()), radius=7,
                color=properties['marker-color'], fill=True, fill_color=properties['marker-color'], fill_opacity=0.9,
                popup=f"<b>{target.location}</b><br>Reading: {reading:.2f}<br>Visited: {visited}"
            ).add_to(sensors_group)

        path_group = folium.FeatureGroup(name=f"Flight Path ({result.status.name})", show=True).add_to(flight_map)
        folium.Marker(
            location=list(center),
            popup=f"<b>Start / Landing Point</b><br>Moves: {result.steps_made}",
            icon=folium.Icon(color='green', icon='plane', prefix='fa')
        ).add_to(path_group)
        if result.moves:
            folium.PolyLine(
                locations=[p.as_lat_lon() for p in result.positions],
                color=OutputConstants.PATH_COLOR, weight=3, opacity=0.9,
                tooltip=f"{result.steps_made} moves, {result.status.name}"
            ).add_to(path_group)

        folium.LayerControl(collapsed=False).add_to(flight_map)
        return flight_map

    def create_2d_plot(self, airspace: ObstacleMap, targets: Sequence[Target], result: FlightResult) -> go.Figure:
        fig = go.Figure()
        for obstacle in airspace.obstacles:
            fig.add_trace(go.Scatter(x=[p.lon for p in obstacle.ring], y=[p.lat for p in obstacle.ring],
                                     mode='lines', name=obstacle.name,
                                     fill=None if obstacle is airspace.confinement else 'toself'))
        fig.add_trace(go.Scatter(x=[t.position.lon for t in targets], y=[t.position.lat for t in targets],
                                 mode='markers', marker=dict(size=9, color='orange'), name='Sensors',
                                 text=[t.location for t in targets]))
        positions = result.positions
        fig.add_trace(go.Scatter(x=[p.lon for p in positions], y=[p.lat for p in positions],
                                 mode='lines+markers', marker=dict(size=3), line=dict(width=2),
                                 name=f'Flight Path ({result.status.name})'))
        fig.update_layout(title=f'Drone Tour: {result.steps_made} moves, {result.status.name}',
                          xaxis_title='Longitude', yaxis_title='Latitude',
                          yaxis=dict(scaleanchor='x', scaleratio=1), margin=dict(r=20, l=10, b=10, t=40))
        return fig

    def save_map(self, m: folium.Map, filename: str) -> None:
        m.save(filename)
        print(f"\n-> Interactive flight map generated: '{filename}'.")

    def save_plot(self, fig: go.Figure, filename: str) -> None:
        fig.write_html(filename)
        print(f"-> Interactive flight plot generated: '{filename}'.")
