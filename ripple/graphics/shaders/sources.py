# ripple/graphics/shaders/sources.py
"""GLSL sources of the three programs: waves, SDF text and the final composite."""

WAVE_VERT = """
#version 330 core

in vec2 in_position;

uniform vec2 u_canvas_size;
uniform vec2 u_translation;
uniform float u_rotation;
uniform float u_scale;
uniform float u_plane_size;

out vec2 v_uv;

void main() {
    v_uv = in_position / (u_plane_size * 2.0) + 0.5;

    float c = cos(u_rotation);
    float s = sin(u_rotation);
    vec2 pos = mat2(c, s, -s, c) * (in_position * u_scale) + u_translation;

    // Pixels with a top-left origin to clip space
    vec2 clip = pos / u_canvas_size * 2.0 - 1.0;
    gl_Position = vec4(clip.x, -clip.y, 0.0, 1.0);
}
"""

WAVE_FRAG = """
#version 330 core

uniform sampler2D u_distortion;
uniform float u_alpha;

in vec2 v_uv;
out vec4 f_color;

void main() {
    vec4 mask = texture(u_distortion, v_uv);
    // Signed offset, accumulated additively into a float target
    f_color = vec4(mask.rg * 2.0 - 1.0, 0.0, mask.a * u_alpha);
}
"""

TEXT_VERT = """
#version 330 core

in vec2 in_position;
in vec2 in_uv;
in float in_scale;

uniform mat3 u_transform;
uniform vec2 u_texture_size;

out vec2 v_uv;
out float v_scale;

void main() {
    v_uv = in_uv / u_texture_size;
    v_scale = in_scale;

    vec3 pos = u_transform * vec3(in_position, 1.0);
    gl_Position = vec4(pos.xy, 0.0, 1.0);
}
"""

TEXT_FRAG = """
#version 330 core

uniform sampler2D u_font;
uniform vec4 u_color;
uniform float u_hint_amount;
uniform float u_border_size;
uniform bool u_subpixel;

in vec2 v_uv;
in float v_scale;
out vec4 f_color;

float coverage(vec2 uv) {
    float sdf = texture(u_font, uv).r;
    // Distance field spans `u_border_size` atlas texels on either side of the edge
    float dist = (sdf - 0.5) * 2.0 * u_border_size * v_scale;
    float sharpness = mix(1.0, 1.4, u_hint_amount);
    return clamp(dist * sharpness + 0.5, 0.0, 1.0);
}

void main() {
    vec3 triplet;

    if (u_subpixel) {
        vec2 step = dFdx(v_uv) / 3.0;
        triplet = vec3(
            coverage(v_uv - step),
            coverage(v_uv),
            coverage(v_uv + step)
        );
    } else {
        triplet = vec3(coverage(v_uv));
    }

    float alpha = max(max(triplet.r, triplet.g), triplet.b) * u_color.a;
    f_color = vec4(u_color.rgb * triplet, alpha);
}
"""

COMPOSITE_VERT = """
#version 330 core

in vec2 in_pos;
out vec2 v_uv;

void main() {
    v_uv = in_pos * 0.5 + 0.5;
    gl_Position = vec4(in_pos, 0.0, 1.0);
}
"""

COMPOSITE_FRAG = """
#version 330 core

uniform sampler2D u_background;
uniform sampler2D u_waves;
uniform sampler2D u_text;
uniform float u_force;

in vec2 v_uv;
out vec4 f_color;

void main() {
    vec2 offset = texture(u_waves, v_uv).rg * u_force;
    vec2 uv = v_uv + offset;

    // Image rows are stored top first
    vec3 background = texture(u_background, vec2(uv.x, 1.0 - uv.y)).rgb;
    vec4 text = texture(u_text, uv);

    f_color = vec4(background * (1.0 - text.a) + text.rgb, 1.0);
}
"""
