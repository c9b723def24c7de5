"""voltvue - 将 PrimeVue Volt 组件按需复制到项目中"""

__version__ = "0.1.0"
